"""
Draft snapshots of a FieldStore (metadata + fields).

Provides JSON/YAML save and load of the editable model via an
intermediate dict representation. This is the author's working
draft, NOT the generated contract document: that text has no reader.

Loading always rebuilds the store through its commands, so a draft
that breaks an invariant (duplicate names, unknown type) is rejected.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping

import yaml

from dcgen.model import ContractMetadata, Field, Sensitivity
from dcgen.store import FieldStore


class DraftFormatError(ValueError):
    """Raised when a draft document does not have the expected shape."""
    pass


def sensitivity_to_dict(s: Sensitivity | None) -> Dict[str, Any] | None:
    if s is None:
        return None
    return {"pii": s.pii, "phi": s.phi}


def field_to_dict(f: Field) -> Dict[str, Any]:
    return {
        "name": f.name,
        "title": f.title,
        "description": f.description,
        "type": f.type.value,
        "required": f.required,
        "sensitive": sensitivity_to_dict(f.sensitive),
        "enumeration": list(f.enumeration) if f.enumeration is not None else None,
        "constraints": dict(f.constraints) if f.constraints is not None else None,
    }


def field_from_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn a saved field into a partial update for FieldStore.update.

    Missing keys are left out, so the store defaults apply.
    """
    return {attr: d[attr] for attr in field_to_dict(Field()) if attr in d}


def metadata_to_dict(m: ContractMetadata) -> Dict[str, Any]:
    return {
        "contract_name": m.contract_name,
        "domain": m.domain,
        "subdomain": m.subdomain,
        "data_product_name": m.data_product_name,
    }


def metadata_from_dict(d: Dict[str, Any]) -> ContractMetadata:
    return ContractMetadata(
        contract_name=d.get("contract_name") or "",
        domain=d.get("domain") or "",
        subdomain=d.get("subdomain") or "",
        data_product_name=d.get("data_product_name") or "",
    )


def store_to_dict(store: FieldStore) -> Dict[str, Any]:
    return {
        "metadata": metadata_to_dict(store.metadata),
        "fields": [field_to_dict(f) for f in store.fields],
    }


def store_from_dict(d: Any) -> FieldStore:
    """
    Rebuild a FieldStore from a saved draft.

    Raises:
        DraftFormatError: If the draft is not shaped like store_to_dict output
        DuplicateNameError, TypeError, ValueError: From the store commands
    """
    if not isinstance(d, Mapping):
        raise DraftFormatError(f"Draft must be a mapping, got {type(d).__name__}")

    metadata = d.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        raise DraftFormatError(f"Draft metadata must be a mapping, got {type(metadata).__name__}")

    fields = d.get("fields") or []
    if not isinstance(fields, list):
        raise DraftFormatError(f"Draft fields must be a list, got {type(fields).__name__}")
    for position, f in enumerate(fields):
        if not isinstance(f, Mapping):
            raise DraftFormatError(f"Draft field {position} must be a mapping, got {type(f).__name__}")

    store = FieldStore(metadata=metadata_from_dict(metadata))
    store.extend(field_from_dict(f) for f in fields)
    return store


def store_to_json(store: FieldStore) -> str:
    return json.dumps(store_to_dict(store), indent=2)


def store_from_json(s: str) -> FieldStore:
    d = json.loads(s)
    return store_from_dict(d)


def store_to_yaml(store: FieldStore) -> str:
    # Keep key order: constraint order is part of the contract
    return yaml.safe_dump(store_to_dict(store), sort_keys=False)


def store_from_yaml(s: str) -> FieldStore:
    d = yaml.safe_load(s)
    return store_from_dict(d or {})


__all__ = [
    "DraftFormatError",
    "sensitivity_to_dict",
    "field_to_dict",
    "field_from_dict",
    "metadata_to_dict",
    "metadata_from_dict",
    "store_to_dict",
    "store_from_dict",
    "store_to_json",
    "store_from_json",
    "store_to_yaml",
    "store_from_yaml",
]
