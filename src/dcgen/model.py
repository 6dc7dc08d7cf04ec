"""
Core Data Contract Model Objects

Defines the fundamental data structures of a data contract draft.

These are pure data classes representing:
    - FieldType (the closed set of field types)
    - Sensitivity (PII / PHI flags)
    - Field (one typed entry of the contract)
    - ContractMetadata (name and tags of the contract)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about the output text format
        - Know nothing about forms, clipboards or any UI state
        - Are immutable (Field, Sensitivity)
        - Represent structure, not behavior

    Mutation happens only through the FieldStore commands.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple, Union


ConstraintValue = Union[str, int, float, bool]


class FieldType(Enum):
    """
    The closed set of types a contract field may declare.

    Keep this list exactly in sync with what consumers of the
    generated contract understand. No other value is constructible.
    """

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def coerce(cls, value: Union["FieldType", str]) -> "FieldType":
        """
        Accept either a FieldType or its plain string spelling.

        Raises:
            ValueError: If the value is not one of the eight known types
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise ValueError(f"{value!r} is not a valid FieldType")


@dataclass(frozen=True)
class Sensitivity:
    """
    Sensitivity flags of a field.

    Properties:
        pii: Field carries personally identifiable information
        phi: Field carries protected health information

    A flag that is False or None is treated the same way:
    it is simply not declared.
    """

    pii: Optional[bool] = None
    phi: Optional[bool] = None


@dataclass(frozen=True)
class Field:
    """
    A single typed entry of a data contract.

    Properties:
        name:
            Identifier of the field, unique within a FieldStore.
            The empty string is valid until the author edits it.

        title / description:
            Optional free text

        type:
            One of the FieldType values (default: string)

        required:
            Whether producers must always fill the field

        sensitive:
            Optional Sensitivity flags.
            None means "not declared at all", which is different from
            Sensitivity(pii=False, phi=False).

        enumeration:
            Optional closed list of allowed literal values, in order

        constraints:
            Optional named validation parameters (e.g. max_length: 20).
            Insertion order is kept and is the output order.
            Read-only once held by a FieldStore.

        key:
            Stable identity assigned by the FieldStore.
            Not part of equality and never written to the contract.
    """

    name: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    type: FieldType = FieldType.STRING
    required: bool = False
    sensitive: Optional[Sensitivity] = None
    enumeration: Optional[Tuple[str, ...]] = None
    constraints: Optional[Mapping[str, ConstraintValue]] = None
    key: int = field(default=0, compare=False, repr=False)


@dataclass
class ContractMetadata:
    """
    Name and tags of the contract.

    All four values are independent and may be empty.
    Empty values are left out of the generated contract.
    """

    contract_name: str = ""
    domain: str = ""
    subdomain: str = ""
    data_product_name: str = ""


__all__ = [
    "ConstraintValue",
    "FieldType",
    "Sensitivity",
    "Field",
    "ContractMetadata",
]
