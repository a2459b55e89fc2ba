"""Per-item edit state and the delete-key policy.

Items are IDLE unless their text field holds focus. Only EDITING entries
are stored, so an item that is idle has no entry at all and removing an
item never leaves state behind.

The delete-key policy is a pure decision table over
``(is_selected, is_text_empty)``:

    selected      empty     -> DELETE
    selected      not empty -> DELETE
    not selected  empty     -> DELETE
    not selected  not empty -> EDIT
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from checklist_editor.models import EditState
from checklist_editor.state.events import EditStateChanged, StateEvent

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)


class KeyAction(Enum):
    """What a key press on an item's field results in."""

    DELETE = "delete"  # Remove the item (and unselect it)
    EDIT = "edit"  # Ordinary text editing


DELETE_KEY_DECISIONS: dict[tuple[bool, bool], KeyAction] = {
    (True, True): KeyAction.DELETE,
    (True, False): KeyAction.DELETE,
    (False, True): KeyAction.DELETE,
    (False, False): KeyAction.EDIT,
}


def resolve_delete_key(is_selected: bool, is_text_empty: bool) -> KeyAction:
    """Decide what a delete key press does to an item.

    Args:
        is_selected: Whether the item is in the selection.
        is_text_empty: Whether the item's current text is empty.

    Returns:
        KeyAction.DELETE to remove the item, KeyAction.EDIT otherwise.
    """
    return DELETE_KEY_DECISIONS[(is_selected, is_text_empty)]


def is_delete_key(key: str, delete_keys: Iterable[str]) -> bool:
    """Check a key name against the configured delete keys, ignoring case."""
    normalized = key.lower()
    return any(normalized == k.lower() for k in delete_keys)


class EditStateTracker:
    """Tracks which item's text field is being edited.

    Only one field holds focus at a time, so starting to edit an item
    ends editing on any other.
    """

    def __init__(self) -> None:
        self._states: dict[str, EditState] = {}
        self._app: App | None = None
        self._emit_callback: Callable[[StateEvent, dict[str, Any]], None] | None = None

    def connect_app(self, app: App) -> None:
        """Connect to a Textual App for message posting."""
        self._app = app

    def set_emit_callback(
        self, callback: Callable[[StateEvent, dict[str, Any]], None]
    ) -> None:
        """Set callback for emitting events to subscribers."""
        self._emit_callback = callback

    def _post_message(self, message: Any) -> None:
        if self._app is not None:
            self._app.post_message(message)

    def _emit(self, event: StateEvent, **kwargs: Any) -> None:
        if self._emit_callback:
            self._emit_callback(event, kwargs)

    def _changed(self, item_id: str, state: EditState) -> None:
        logger.debug("Item %s is now %s", item_id, state.value)
        self._emit(StateEvent.EDIT_STATE_CHANGED, item_id=item_id, edit_state=state)
        self._post_message(EditStateChanged(item_id, state))

    def state_of(self, item_id: str) -> EditState:
        """Get the edit state of an item."""
        return self._states.get(item_id, EditState.IDLE)

    def is_editing(self, item_id: str) -> bool:
        return self._states.get(item_id) == EditState.EDITING

    def begin(self, item_id: str) -> None:
        """IDLE -> EDITING on focus start."""
        for other_id in [i for i in self._states if i != item_id]:
            self.end(other_id)
        if item_id not in self._states:
            self._states[item_id] = EditState.EDITING
            self._changed(item_id, EditState.EDITING)

    def end(self, item_id: str) -> None:
        """EDITING -> IDLE on focus end; no-op if already idle."""
        if self._states.pop(item_id, None) is not None:
            self._changed(item_id, EditState.IDLE)

    def drop(self, item_id: str) -> None:
        """Forget any state for a removed item."""
        self.end(item_id)

    def editing_ids(self) -> list[str]:
        """Return the IDs of items currently being edited."""
        return list(self._states)
