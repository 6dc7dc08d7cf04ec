"""
FieldStore: the single owner of a contract draft.

Holds the ordered collection of Fields plus the contract metadata,
and is the only place where either may change.

INVARIANTS (checked on every command, not at generation time):
    - Field names are pairwise distinct
    - Order is insertion order; removal never reorders the rest
    - Field.type is always a FieldType

Every command validates first and applies second.
A rejected command leaves the store exactly as it was.
"""

from __future__ import annotations

import itertools
import logging
import types
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from dcgen.model import ContractMetadata, Field, FieldType, Sensitivity
from dcgen.backends.yaml_generator import generate

logger = logging.getLogger(__name__)


UPDATABLE_ATTRIBUTES = (
    "name",
    "title",
    "description",
    "type",
    "required",
    "sensitive",
    "enumeration",
    "constraints",
)


class DuplicateNameError(ValueError):
    """Raised when an update would give two fields the same name."""

    def __init__(self, name: str, index: int):
        super().__init__(f"Field name {name!r} is already used by field {index}")
        self.name = name
        self.index = index


def _optional_text(attr: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{attr} must be a string or None, got {type(value).__name__}")


def _to_sensitivity(value: Any) -> Optional[Sensitivity]:
    if value is None or isinstance(value, Sensitivity):
        return value
    if isinstance(value, Mapping):
        return Sensitivity(pii=value.get("pii"), phi=value.get("phi"))
    raise TypeError(f"sensitive must be a Sensitivity, a mapping or None, got {type(value).__name__}")


def _to_enumeration(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        raise TypeError("enumeration must be a sequence of strings, not a single string")
    values = tuple(value)
    for entry in values:
        if not isinstance(entry, str):
            raise TypeError(f"enumeration entries must be strings, got {type(entry).__name__}")
    return values or None


def _to_constraints(value: Any) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError(f"constraints must be a mapping or None, got {type(value).__name__}")
    if not value:
        return None
    # Private copy behind a read-only view: neither the caller nor a
    # snapshot reader can change the stored constraints
    return types.MappingProxyType(dict(value))


def _normalize_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and normalize a partial update.

    Returns a new dict holding only the attributes that were supplied.
    Absent keys stay absent: they mean "unchanged".

    Raises:
        TypeError: Unknown attribute or wrong value type
        ValueError: Unknown field type
    """
    unknown = sorted(set(changes) - set(UPDATABLE_ATTRIBUTES))
    if unknown:
        raise TypeError(f"Unknown field attribute(s): {', '.join(unknown)}")

    normalized: Dict[str, Any] = {}
    for attr, value in changes.items():
        if attr == "name":
            if not isinstance(value, str):
                raise TypeError(f"name must be a string, got {type(value).__name__}")
            normalized[attr] = value
        elif attr in ("title", "description"):
            normalized[attr] = _optional_text(attr, value)
        elif attr == "type":
            normalized[attr] = FieldType.coerce(value)
        elif attr == "required":
            if not isinstance(value, bool):
                raise TypeError(f"required must be a bool, got {type(value).__name__}")
            normalized[attr] = value
        elif attr == "sensitive":
            normalized[attr] = _to_sensitivity(value)
        elif attr == "enumeration":
            normalized[attr] = _to_enumeration(value)
        elif attr == "constraints":
            normalized[attr] = _to_constraints(value)
    return normalized


def parse_enumeration(text: str) -> List[str]:
    """
    Split a comma-separated list of allowed values.

    Entries are trimmed and blank entries dropped:
        "A, B,,C " -> ["A", "B", "C"]
    """
    return [value.strip() for value in text.split(",") if value.strip()]


class FieldStore:
    """
    Ordered, name-unique collection of contract fields plus metadata.

    Commands:
        add()                      append a default field
        remove(index)              delete, shifting later fields down
        update(index, **changes)   shallow merge of a partial field
        update_enumeration(index, text)
        set_contract_name / set_domain / set_subdomain / set_data_product_name

    Reads:
        fields      immutable snapshot (tuple) in collection order
        metadata    copy of the current ContractMetadata
    """

    def __init__(self, metadata: Optional[ContractMetadata] = None):
        self._fields: List[Field] = []
        self._metadata = replace(metadata) if metadata is not None else ContractMetadata()
        self._keys = itertools.count(1)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def metadata(self) -> ContractMetadata:
        return replace(self._metadata)

    def __len__(self) -> int:
        return len(self._fields)

    def index_of(self, key: int) -> Optional[int]:
        """Position of the field carrying a stable key, or None."""
        for index, fld in enumerate(self._fields):
            if fld.key == key:
                return index
        return None

    def generate(self) -> str:
        """Render the current draft as contract text."""
        return generate(self._metadata, self.fields)

    # ------------------------------------------------------------------
    # Field commands
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        # Negative positions are out of range, not "count from the end"
        if not 0 <= index < len(self._fields):
            raise IndexError(f"Field index {index} out of range (0..{len(self._fields) - 1})")

    def add(self) -> Field:
        """
        Append a new field with default values.

        Defaults: name "", type string, required False,
        sensitive Sensitivity(pii=False, phi=False).

        Returns:
            The new Field, carrying its stable key
        """
        new_field = Field(
            name="",
            type=FieldType.STRING,
            required=False,
            sensitive=Sensitivity(pii=False, phi=False),
            key=next(self._keys),
        )
        self._fields.append(new_field)
        logger.debug("Added field #%d at index %d", new_field.key, len(self._fields) - 1)
        return new_field

    def remove(self, index: int) -> Field:
        """
        Delete the field at index.

        Every field after it moves down one position;
        relative order is preserved.

        Raises:
            IndexError: If index is out of range
        """
        self._check_index(index)
        removed = self._fields.pop(index)
        logger.debug("Removed field %r (#%d) from index %d", removed.name, removed.key, index)
        return removed

    def update(self, index: int, **changes: Any) -> Field:
        """
        Merge a partial field into the field at index.

        Present keys fully replace the attribute (supplying `sensitive`
        replaces the whole Sensitivity; None clears an optional
        attribute). Absent keys are untouched. This is a shallow merge.

        Returns:
            The updated Field

        Raises:
            IndexError: If index is out of range
            DuplicateNameError: If `name` is already used by another field
            TypeError / ValueError: On an unknown attribute or invalid value
        """
        self._check_index(index)
        normalized = _normalize_changes(changes)

        if "name" in normalized:
            name = normalized["name"]
            for other_index, other in enumerate(self._fields):
                if other_index != index and other.name == name:
                    logger.warning(
                        "Rejected rename of field %d to %r: already used by field %d",
                        index, name, other_index,
                    )
                    raise DuplicateNameError(name, other_index)

        updated = replace(self._fields[index], **normalized)
        self._fields[index] = updated
        logger.debug("Updated field %d: %s", index, ", ".join(sorted(normalized)) or "(no changes)")
        return updated

    def update_enumeration(self, index: int, text: str) -> Field:
        """
        Set the enumeration from comma-separated text.

        An empty result clears the enumeration.
        """
        values = parse_enumeration(text)
        return self.update(index, enumeration=values or None)

    def extend(self, partials: Iterable[Mapping[str, Any]]) -> None:
        """
        Add one field per partial, in order.

        Each partial goes through add() + update(), so the
        uniqueness check applies. Fields added before a rejected
        partial are rolled back.
        """
        start = len(self._fields)
        try:
            for partial in partials:
                self.add()
                self.update(len(self._fields) - 1, **dict(partial))
        except (DuplicateNameError, TypeError, ValueError):
            del self._fields[start:]
            raise

    # ------------------------------------------------------------------
    # Metadata setters
    # ------------------------------------------------------------------

    def set_contract_name(self, value: str) -> None:
        self._metadata.contract_name = value

    def set_domain(self, value: str) -> None:
        self._metadata.domain = value

    def set_subdomain(self, value: str) -> None:
        self._metadata.subdomain = value

    def set_data_product_name(self, value: str) -> None:
        self._metadata.data_product_name = value


__all__ = [
    "DuplicateNameError",
    "FieldStore",
    "UPDATABLE_ATTRIBUTES",
    "parse_enumeration",
]
