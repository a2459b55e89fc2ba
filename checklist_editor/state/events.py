"""State events and Textual message classes.

This module defines the events that can be dispatched from state changes
and the corresponding Textual Message classes for UI updates.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from checklist_editor.models import EditState, Item


class StateEvent(Enum):
    """Events that can be dispatched from state changes."""

    ITEM_ADDED = "item_added"
    ITEM_REMOVED = "item_removed"
    ITEM_TEXT_CHANGED = "item_text_changed"
    SELECTION_CHANGED = "selection_changed"
    EDIT_STATE_CHANGED = "edit_state_changed"


# =============================================================================
# Textual Messages for State Events
# =============================================================================


class StateMessage(Message):
    """Base class for state change messages."""

    pass


class ItemAdded(StateMessage):
    """Posted when an item is appended to the list."""

    def __init__(self, item: Item) -> None:
        super().__init__()
        self.item = item


class ItemRemoved(StateMessage):
    """Posted when an item is removed from the list."""

    def __init__(self, item: Item) -> None:
        super().__init__()
        self.item = item


class ItemTextChanged(StateMessage):
    """Posted when an item's text is replaced."""

    def __init__(self, item: Item) -> None:
        super().__init__()
        self.item = item


class SelectionChanged(StateMessage):
    """Posted when selection membership changes.

    ``item_id`` is None when the whole selection was cleared at once.
    """

    def __init__(
        self, item_id: str | None, is_selected: bool, selected_count: int
    ) -> None:
        super().__init__()
        self.item_id = item_id
        self.is_selected = is_selected
        self.selected_count = selected_count


class EditStateChanged(StateMessage):
    """Posted when an item starts or stops being edited."""

    def __init__(self, item_id: str, edit_state: EditState) -> None:
        super().__init__()
        self.item_id = item_id
        self.edit_state = edit_state
