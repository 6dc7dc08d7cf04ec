"""
Tests for editor expand/collapse flags.

Flags are keyed by stable field keys, so they must follow their
field when an earlier field is removed.
"""

from dcgen.store import FieldStore
from dcgen.view_state import ExpansionState


def test_added_field_starts_expanded():
    store = FieldStore()
    view = ExpansionState()
    fld = store.add()
    view.on_added(fld)
    assert view.is_expanded(fld.key)


def test_toggle():
    view = ExpansionState()
    assert view.toggle(7) is True
    assert view.toggle(7) is False
    assert not view.is_expanded(7)


def test_unknown_key_is_collapsed():
    assert not ExpansionState().is_expanded(42)


def test_flags_follow_fields_across_removal():
    store = FieldStore()
    view = ExpansionState()
    added = [store.add() for _ in range(3)]
    for fld in added:
        view.on_added(fld)
    view.toggle(added[1].key)

    removed = store.remove(0)
    view.discard(removed.key)

    # Former index 1 is now index 0 and is still collapsed
    assert not view.is_expanded(store.fields[0].key)
    assert view.is_expanded(store.fields[1].key)


def test_prune_drops_removed_fields():
    store = FieldStore()
    view = ExpansionState()
    for _ in range(2):
        view.on_added(store.add())
    gone = store.remove(1)
    view.prune(store)
    assert gone.key not in view.expanded
    assert list(view.expanded) == [store.fields[0].key]
