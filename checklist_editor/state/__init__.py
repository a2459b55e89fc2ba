"""Checklist state management.

This package holds the list-and-selection state machine: an item store,
a selection set and per-item edit state, composed by ListController.

Exports:
    - ListController: Composition of the managers; the public contract
    - ChecklistSnapshot: Immutable state snapshot for rendering
    - StateEvent: Enum of state change events
    - State message classes for Textual integration
    - Focused managers: ItemStore, SelectionSet, EditStateTracker
    - The delete-key decision table: KeyAction, resolve_delete_key
"""

from checklist_editor.state.controller import ListController
from checklist_editor.state.edit_state import (
    DELETE_KEY_DECISIONS,
    EditStateTracker,
    KeyAction,
    is_delete_key,
    resolve_delete_key,
)
from checklist_editor.state.events import (
    EditStateChanged,
    ItemAdded,
    ItemRemoved,
    ItemTextChanged,
    SelectionChanged,
    StateEvent,
    StateMessage,
)
from checklist_editor.state.item_store import ItemStore
from checklist_editor.state.selection import SelectionSet
from checklist_editor.state.snapshot import ChecklistSnapshot

__all__ = [
    # Main controller
    "ListController",
    "ChecklistSnapshot",
    # Focused managers
    "ItemStore",
    "SelectionSet",
    "EditStateTracker",
    # Delete-key policy
    "DELETE_KEY_DECISIONS",
    "KeyAction",
    "is_delete_key",
    "resolve_delete_key",
    # Events
    "StateEvent",
    "StateMessage",
    "ItemAdded",
    "ItemRemoved",
    "ItemTextChanged",
    "SelectionChanged",
    "EditStateChanged",
]
