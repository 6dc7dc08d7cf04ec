"""
Expand/collapse flags for an editor showing a FieldStore.

This is presentation state, not contract state: nothing here
ever reaches the generated contract.

Flags are keyed by the stable Field.key, so removing a field
never shifts the flags of the fields that follow it.
"""

from dataclasses import dataclass, field
from typing import Dict

from dcgen.model import Field
from dcgen.store import FieldStore


@dataclass
class ExpansionState:
    """Per-field expanded/collapsed flags."""

    expanded: Dict[int, bool] = field(default_factory=dict)

    def on_added(self, fld: Field) -> None:
        """Newly added fields open expanded so they can be edited."""
        self.expanded[fld.key] = True

    def toggle(self, key: int) -> bool:
        self.expanded[key] = not self.expanded.get(key, False)
        return self.expanded[key]

    def is_expanded(self, key: int) -> bool:
        return self.expanded.get(key, False)

    def discard(self, key: int) -> None:
        self.expanded.pop(key, None)

    def prune(self, store: FieldStore) -> None:
        """Drop flags of fields no longer in the store."""
        live = {fld.key for fld in store.fields}
        for key in list(self.expanded):
            if key not in live:
                del self.expanded[key]


__all__ = ["ExpansionState"]
