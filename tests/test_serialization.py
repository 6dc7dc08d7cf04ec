"""
Tests for draft snapshots of a FieldStore.

These tests ensure a saved draft loads back into an equal store,
and that loading goes through the store's checks.
"""

import pytest
from dcgen.examples import build_example_customer_contract
from dcgen.model import FieldType, Sensitivity
from dcgen.serialization import (
    DraftFormatError,
    field_from_dict,
    store_from_dict,
    store_from_json,
    store_from_yaml,
    store_to_dict,
    store_to_json,
    store_to_yaml,
)
from dcgen.store import DuplicateNameError


def test_json_roundtrip():
    store = build_example_customer_contract()
    restored = store_from_json(store_to_json(store))
    assert store_to_dict(restored) == store_to_dict(store)
    assert restored.generate() == store.generate()


def test_yaml_roundtrip_keeps_constraint_order():
    store = build_example_customer_contract()
    restored = store_from_yaml(store_to_yaml(store))
    assert list(restored.fields[1].constraints) == ["max_length", "format"]
    assert restored.generate() == store.generate()


def test_hand_written_yaml_draft():
    draft = """
metadata:
  contract_name: Patients
  domain: health
fields:
  - name: patient_id
    type: integer
    required: true
  - name: diagnosis
    sensitive: {phi: true}
    enumeration: [flu, cold]
"""
    store = store_from_yaml(draft)
    assert store.metadata.contract_name == "Patients"
    assert store.fields[0].type is FieldType.INTEGER
    assert store.fields[1].sensitive == Sensitivity(pii=None, phi=True)
    assert store.fields[1].enumeration == ("flu", "cold")


def test_missing_field_keys_use_store_defaults():
    store = store_from_dict({"fields": [{"name": "id"}]})
    assert store.fields[0].sensitive == Sensitivity(pii=False, phi=False)
    assert store.fields[0].required is False


def test_field_from_dict_drops_unknown_keys():
    assert field_from_dict({"name": "a", "colour": "blue"}) == {"name": "a"}


def test_duplicate_names_in_draft_rejected():
    with pytest.raises(DuplicateNameError):
        store_from_dict({"fields": [{"name": "id"}, {"name": "id"}]})


def test_invalid_type_in_draft_rejected():
    with pytest.raises(ValueError):
        store_from_dict({"fields": [{"name": "id", "type": "varchar"}]})


def test_empty_yaml_gives_empty_store():
    store = store_from_yaml("")
    assert len(store) == 0
    assert store.generate() == "tags:\nname: MyDataContract\nfields:"


@pytest.mark.parametrize("draft", [
    "- a\n- b\n",
    "fields:\n  id:\n    type: integer\n",
    "fields:\n  - id\n",
    "metadata: [sales]\n",
])
def test_misshapen_yaml_draft_rejected(draft):
    with pytest.raises(DraftFormatError):
        store_from_yaml(draft)
