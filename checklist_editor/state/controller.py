"""List controller composing the item store, selection and edit state.

This is the only entry point the presentation layer talks to: it
forwards raw input events here and renders the snapshot it gets back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from checklist_editor.exceptions import IllegalSelectionError, ItemError
from checklist_editor.ids import IdGenerator, create_id_generator
from checklist_editor.logging_config import log_exception
from checklist_editor.models import (
    AppSettings,
    EditState,
    EventType,
    InputEvent,
    ItemView,
)
from checklist_editor.state.edit_state import (
    EditStateTracker,
    KeyAction,
    is_delete_key,
    resolve_delete_key,
)
from checklist_editor.state.events import StateEvent
from checklist_editor.state.item_store import ItemStore
from checklist_editor.state.selection import SelectionSet
from checklist_editor.state.snapshot import ChecklistSnapshot

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)


@dataclass
class ListController:
    """Checklist state machine with event dispatch.

    Every removal goes through `remove_item()`, which unselects the item
    and drops its edit state in the same call, so the selection and the
    edit state never reference a removed item.

    State changes are reported two ways, as in the rest of the app:

    1. **Callback-based subscriptions** via `subscribe()` / `unsubscribe()`.
    2. **Textual Message posting** once `connect_app()` has been called.

    Example:
        controller = ListController()
        item_id = controller.add_item()
        controller.edit_item(item_id, "Buy milk")
        controller.toggle_select(item_id)
        controller.remove_selected()
    """

    settings: AppSettings = field(default_factory=AppSettings)
    id_generator: IdGenerator | None = None

    _store: ItemStore = field(init=False, repr=False)
    _selection: SelectionSet = field(default_factory=SelectionSet, repr=False)
    _edits: EditStateTracker = field(default_factory=EditStateTracker, repr=False)

    _listeners: dict[StateEvent, list[Callable[..., Any]]] = field(
        default_factory=lambda: {e: [] for e in StateEvent}, repr=False
    )
    _app: App | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Create the store and wire manager emit callbacks."""
        if self.id_generator is None:
            self.id_generator = create_id_generator(self.settings.id_style)
        self._store = ItemStore(self.id_generator)
        self._store.set_emit_callback(self._emit_from_manager)
        self._selection.set_emit_callback(self._emit_from_manager)
        self._edits.set_emit_callback(self._emit_from_manager)

    def _emit_from_manager(self, event: StateEvent, kwargs: dict[str, Any]) -> None:
        """Handle emit calls from the managers."""
        self.emit(event, **kwargs)

    # =========================================================================
    # Connection and Event System
    # =========================================================================

    def connect_app(self, app: App) -> None:
        """Connect to a Textual App for message posting.

        Args:
            app: The Textual App instance to post messages to.
        """
        self._app = app
        self._store.connect_app(app)
        self._selection.connect_app(app)
        self._edits.connect_app(app)

    def subscribe(self, event: StateEvent, callback: Callable[..., Any]) -> None:
        """Register callback for state event.

        Args:
            event: The event type to subscribe to.
            callback: Function to call with the event's keyword arguments.
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: StateEvent, callback: Callable[..., Any]) -> None:
        """Remove callback from event."""
        if event in self._listeners:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass

    def emit(self, event: StateEvent, **kwargs: Any) -> None:
        """Dispatch event to all subscribers.

        A failing subscriber is logged and does not stop the others.
        """
        for callback in list(self._listeners.get(event, [])):
            try:
                callback(**kwargs)
            except Exception as e:
                log_exception(logger, e, f"Subscriber for {event.value} failed")

    def apply_settings(self, settings: AppSettings) -> None:
        """Use new settings; the ID generator of existing items is kept."""
        self.settings = settings

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def item_ids(self) -> list[str]:
        """Item IDs in display order."""
        return self._store.ids()

    @property
    def selected_ids(self) -> list[str]:
        """Selected item IDs in selection order."""
        return self._selection.ids()

    def selected_count(self) -> int:
        """Number of selected items; gates the bulk delete action."""
        return self._selection.count()

    def get_text(self, item_id: str) -> str | None:
        """Current text of an item, or None if it does not exist."""
        item = self._store.get(item_id)
        return item.text if item is not None else None

    def is_selected(self, item_id: str) -> bool:
        return self._selection.contains(item_id)

    def edit_state(self, item_id: str) -> EditState:
        return self._edits.state_of(item_id)

    def editing_ids(self) -> list[str]:
        """IDs of items with live edit state."""
        return self._edits.editing_ids()

    def to_snapshot(self) -> ChecklistSnapshot:
        """Create an immutable snapshot of the current state."""
        rows = tuple(
            ItemView(
                id=item.id,
                text=item.text,
                is_selected=self._selection.contains(item.id),
                is_editing=self._edits.is_editing(item.id),
            )
            for item in self._store.list_items()
        )
        return ChecklistSnapshot(rows=rows, selected_count=self._selection.count())

    # =========================================================================
    # Operations
    # =========================================================================

    def add_item(self) -> str:
        """Append a new empty item at the end of the list.

        Returns:
            The new item's ID.
        """
        return self._store.add()

    def edit_item(self, item_id: str, text: str) -> bool:
        """Replace an item's text.

        Returns:
            True if the item exists, False if the call was a no-op.
        """
        if not self._store.set_text(item_id, text):
            logger.debug("Ignoring edit for unknown item %s", item_id)
            return False
        return True

    def toggle_select(self, item_id: str) -> bool:
        """Flip selection of an item.

        Items with empty text cannot be selected or unselected through
        this call; like unknown IDs, that is a no-op.

        Returns:
            Whether the item is selected after the call.
        """
        try:
            item = self._store.require(item_id, operation="toggle_select")
            if item.text == "":
                raise IllegalSelectionError(item_id)
        except ItemError as e:
            logger.debug("Ignoring toggle_select: %s", e)
            return self._selection.contains(item_id)

        if self._selection.contains(item_id):
            self._selection.unselect(item_id)
            return False
        self._selection.select(item_id)
        return True

    def remove_item(self, item_id: str) -> bool:
        """Remove an item together with its selection and edit state.

        Returns:
            True if an item was removed, False if the ID was unknown.
        """
        removed = self._store.remove(item_id)
        self._selection.unselect(item_id)
        self._edits.drop(item_id)
        return removed is not None

    def remove_selected(self) -> list[str]:
        """Remove every selected item, then clear the selection.

        Returns:
            The IDs that were removed.
        """
        removed = [
            item_id for item_id in self._selection.ids() if self.remove_item(item_id)
        ]
        self._selection.clear()
        if removed:
            logger.info("Removed %d selected item(s)", len(removed))
        return removed

    def handle_key(self, item_id: str, key: str) -> KeyAction | None:
        """Apply the delete-key policy to a key press on an item.

        Returns:
            The action taken, or None if the item does not exist.
        """
        item = self._store.get(item_id)
        if item is None:
            logger.debug("Ignoring key %r for unknown item %s", key, item_id)
            return None
        if not is_delete_key(key, self.settings.delete_keys):
            return KeyAction.EDIT

        action = resolve_delete_key(
            is_selected=self._selection.contains(item_id),
            is_text_empty=item.text == "",
        )
        if action == KeyAction.DELETE:
            self.remove_item(item_id)
        return action

    # =========================================================================
    # Inbound Events
    # =========================================================================

    def focus_start(self, item_id: str) -> ChecklistSnapshot:
        """The item's text field gained focus."""
        if self._store.contains(item_id):
            self._edits.begin(item_id)
        return self.to_snapshot()

    def focus_end(self, item_id: str) -> ChecklistSnapshot:
        """The item's text field lost focus."""
        self._edits.end(item_id)
        return self.to_snapshot()

    def text_changed(self, item_id: str, text: str) -> ChecklistSnapshot:
        """The item's text field content changed."""
        self.edit_item(item_id, text)
        return self.to_snapshot()

    def key_pressed(self, item_id: str, key: str) -> ChecklistSnapshot:
        """A key was pressed while the item's field had focus."""
        self.handle_key(item_id, key)
        return self.to_snapshot()

    def press_add(self) -> ChecklistSnapshot:
        """The add button was pressed."""
        self.add_item()
        return self.to_snapshot()

    def press_delete_selected(self) -> ChecklistSnapshot:
        """The bulk delete button was pressed."""
        self.remove_selected()
        return self.to_snapshot()

    def press_toggle_select(self, item_id: str) -> ChecklistSnapshot:
        """The item's select toggle was pressed."""
        self.toggle_select(item_id)
        return self.to_snapshot()

    def dispatch(self, event: InputEvent) -> ChecklistSnapshot:
        """Apply a recorded input event.

        Item events with no item ID, and text or key events with no
        payload, are no-ops.
        """
        if event.type == EventType.PRESS_ADD:
            return self.press_add()
        if event.type == EventType.PRESS_DELETE_SELECTED:
            return self.press_delete_selected()
        if event.item_id is None:
            return self.to_snapshot()

        if event.type == EventType.FOCUS_START:
            return self.focus_start(event.item_id)
        if event.type == EventType.FOCUS_END:
            return self.focus_end(event.item_id)
        if event.type == EventType.PRESS_TOGGLE_SELECT:
            return self.press_toggle_select(event.item_id)
        if event.type == EventType.TEXT_CHANGED and event.text is not None:
            return self.text_changed(event.item_id, event.text)
        if event.type == EventType.KEY_PRESSED and event.key is not None:
            return self.key_pressed(event.item_id, event.key)
        return self.to_snapshot()
