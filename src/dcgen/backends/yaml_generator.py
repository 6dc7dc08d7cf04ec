"""
Data contract text generator.

Converts contract metadata and an ordered list of Fields into the
YAML-shaped contract document.

The output grammar is fixed and line-oriented (2 spaces per level):

    tags:
      domain: <domain>
      subdomain: <subdomain>
      data_product_name: <data product>
    name: <contract name>
    fields:
      <field name>:
        title: "<title>"
        description: "<description>"
        type: <type>
        required: <true|false>
        sensitive:
          pii: true
          phi: true
        enumeration:
          - <value>
        constraints:
          <key>: <value>

Optional lines are left out when their value is empty.
Values are written verbatim: nothing is escaped.
"""

import logging
from typing import Iterable, List

from dcgen.model import ContractMetadata, ConstraintValue, Field

logger = logging.getLogger(__name__)


DEFAULT_CONTRACT_NAME = "MyDataContract"
INDENT = "  "


def _format_scalar(value: ConstraintValue) -> str:
    """Render a constraint value the way the contract expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _type_name(field_type) -> str:
    return getattr(field_type, "value", field_type)


def _field_lines(fld: Field) -> List[str]:
    body = INDENT * 2
    nested = INDENT * 3

    lines = [f"{INDENT}{fld.name}:"]
    if fld.title:
        lines.append(f'{body}title: "{fld.title}"')
    if fld.description:
        lines.append(f'{body}description: "{fld.description}"')
    lines.append(f"{body}type: {_type_name(fld.type)}")
    lines.append(f"{body}required: {_format_scalar(bool(fld.required))}")

    # Header is kept even when no flag is set
    if fld.sensitive is not None:
        lines.append(f"{body}sensitive:")
        if fld.sensitive.pii:
            lines.append(f"{nested}pii: true")
        if fld.sensitive.phi:
            lines.append(f"{nested}phi: true")

    if fld.enumeration:
        lines.append(f"{body}enumeration:")
        for value in fld.enumeration:
            lines.append(f"{nested}- {value}")

    if fld.constraints:
        lines.append(f"{body}constraints:")
        for key, value in fld.constraints.items():
            lines.append(f"{nested}{key}: {_format_scalar(value)}")

    return lines


def generate(metadata: ContractMetadata, fields: Iterable[Field]) -> str:
    """
    Generate the contract document.

    Pure and deterministic: equal inputs give byte-identical output.

    Args:
        metadata: Contract name and tags
        fields: Fields in collection order

    Returns:
        Contract text, lines joined with "\\n", no trailing newline
    """
    lines = ["tags:"]
    if metadata.domain:
        lines.append(f"{INDENT}domain: {metadata.domain}")
    if metadata.subdomain:
        lines.append(f"{INDENT}subdomain: {metadata.subdomain}")
    if metadata.data_product_name:
        lines.append(f"{INDENT}data_product_name: {metadata.data_product_name}")

    lines.append(f"name: {metadata.contract_name or DEFAULT_CONTRACT_NAME}")

    lines.append("fields:")
    for fld in tuple(fields):
        lines.extend(_field_lines(fld))

    return "\n".join(lines)


def save_contract_file(metadata: ContractMetadata, fields: Iterable[Field], filename: str) -> None:
    """
    Generate the contract and save it to a file.

    Args:
        metadata: Contract name and tags
        fields: Fields in collection order
        filename: Output file path (.yaml extension recommended)
    """
    text = generate(metadata, fields)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote data contract to %s", filename)


__all__ = ["DEFAULT_CONTRACT_NAME", "INDENT", "generate", "save_contract_file"]
