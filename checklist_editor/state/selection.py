"""Selection set.

Holds the IDs of items marked for group action. It only references
items; keeping it a subset of the item store is the controller's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from checklist_editor.state.events import SelectionChanged, StateEvent

if TYPE_CHECKING:
    from textual.app import App


class SelectionSet:
    """Set of selected item IDs."""

    def __init__(self) -> None:
        # dict as an ordered set so bulk operations run in selection order
        self._ids: dict[str, None] = {}
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

    def _notify(self, item_id: str | None, is_selected: bool) -> None:
        count = len(self._ids)
        self._emit(
            StateEvent.SELECTION_CHANGED,
            item_id=item_id,
            is_selected=is_selected,
            selected_count=count,
        )
        self._post_message(SelectionChanged(item_id, is_selected, count))

    def select(self, item_id: str) -> None:
        """Add an ID to the selection.

        The caller must ensure the item exists and has non-empty text.
        """
        if item_id not in self._ids:
            self._ids[item_id] = None
            self._notify(item_id, True)

    def unselect(self, item_id: str) -> None:
        """Remove an ID from the selection; no-op if absent."""
        if item_id in self._ids:
            del self._ids[item_id]
            self._notify(item_id, False)

    def contains(self, item_id: str) -> bool:
        return item_id in self._ids

    def count(self) -> int:
        return len(self._ids)

    def clear(self) -> None:
        """Drop every selected ID."""
        if self._ids:
            self._ids.clear()
            self._notify(None, False)

    def ids(self) -> list[str]:
        """Return the selected IDs in selection order."""
        return list(self._ids)
