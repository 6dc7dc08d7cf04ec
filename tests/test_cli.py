"""
Tests for the dcgen command line.
"""

import json

from dcgen.cli import load_draft, main


DRAFT_YAML = """
metadata:
  domain: sales
fields:
  - name: id
    type: integer
    required: true
    sensitive: null
"""

EXPECTED = (
    "tags:\n"
    "  domain: sales\n"
    "name: MyDataContract\n"
    "fields:\n"
    "  id:\n"
    "    type: integer\n"
    "    required: true"
)


def test_prints_contract(tmp_path, capsys):
    draft = tmp_path / "draft.yaml"
    draft.write_text(DRAFT_YAML, encoding="utf-8")
    assert main([str(draft)]) == 0
    assert capsys.readouterr().out == EXPECTED + "\n"


def test_writes_output_file(tmp_path):
    draft = tmp_path / "draft.yaml"
    draft.write_text(DRAFT_YAML, encoding="utf-8")
    out = tmp_path / "contract.yaml"
    assert main([str(draft), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == EXPECTED


def test_json_draft(tmp_path):
    draft = tmp_path / "draft.json"
    draft.write_text(json.dumps({"fields": [{"name": "id"}]}), encoding="utf-8")
    store = load_draft(str(draft))
    assert [f.name for f in store.fields] == ["id"]


def test_missing_draft_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "nope.yaml")]) == 1
    assert "cannot load draft" in capsys.readouterr().err


def test_duplicate_names_report_error(tmp_path, capsys):
    draft = tmp_path / "draft.yaml"
    draft.write_text("fields:\n  - name: id\n  - name: id\n", encoding="utf-8")
    assert main([str(draft)]) == 1
    assert "already used" in capsys.readouterr().err


def test_list_draft_reports_error(tmp_path, capsys):
    draft = tmp_path / "draft.yaml"
    draft.write_text("- a\n- b\n", encoding="utf-8")
    assert main([str(draft)]) == 1
    assert "Draft must be a mapping" in capsys.readouterr().err


def test_fields_mapping_reports_error(tmp_path, capsys):
    """A fields mapping is rejected rather than loaded as unnamed fields."""
    draft = tmp_path / "draft.yaml"
    draft.write_text("fields:\n  id:\n    type: integer\n", encoding="utf-8")
    assert main([str(draft)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "fields must be a list" in captured.err


def test_unwritable_output_reports_error(tmp_path, capsys):
    draft = tmp_path / "draft.yaml"
    draft.write_text(DRAFT_YAML, encoding="utf-8")
    out = tmp_path / "missing_dir" / "contract.yaml"
    assert main([str(draft), "-o", str(out)]) == 1
    assert "cannot write contract" in capsys.readouterr().err
