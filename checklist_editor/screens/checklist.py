"""Checklist screen.

Renders the controller's snapshot as a column of rows above an action
bar and forwards every input event to the controller.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widget import AwaitMount
from textual.widgets import Button, Footer, Header, Input

from checklist_editor.state import ChecklistSnapshot, ListController
from checklist_editor.widgets import ActionBar, ItemInput, ItemRow

logger = logging.getLogger(__name__)


class ChecklistScreen(Screen):
    """Editable checklist.

    Rows appear in append order. Items can be selected with the toggle
    next to them (or ctrl+t on the focused row) once they have text, and
    selected items are removed together with "Delete (n)". Backspace on an
    empty or selected row removes that row.
    """

    BINDINGS = [
        Binding("ctrl+n", "add_item", "Add New", priority=True),
        Binding("ctrl+t", "toggle_select", "Select", priority=True),
        Binding("ctrl+r", "delete_selected", "Delete Selected", priority=True),
    ]

    def __init__(
        self, controller: ListController, placeholder: str = "New Item"
    ) -> None:
        """Initialize the screen.

        Args:
            controller: The state machine this screen renders.
            placeholder: Placeholder shown in empty rows.
        """
        super().__init__()
        self.controller = controller
        self.placeholder = placeholder
        self._rows: dict[str, ItemRow] = {}

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        yield VerticalScroll(id="items")
        yield ActionBar()
        yield Footer()

    def on_mount(self) -> None:
        """Render whatever the controller already holds."""
        self.render_snapshot(self.controller.to_snapshot())

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_snapshot(self, snapshot: ChecklistSnapshot) -> AwaitMount | None:
        """Bring the rows and the action bar in line with a snapshot.

        New items are only ever appended, so new rows are mounted at the end.

        Returns:
            An awaitable that completes once new rows are mounted, or None
            when no row was added.
        """
        container = self.query_one("#items", VerticalScroll)
        live_ids = set(snapshot.ids)

        for item_id in [i for i in self._rows if i not in live_ids]:
            self._rows.pop(item_id).remove()

        new_rows: list[ItemRow] = []
        for view in snapshot.rows:
            row = self._rows.get(view.id)
            if row is None:
                row = ItemRow(view, placeholder=self.placeholder)
                self._rows[view.id] = row
                new_rows.append(row)
            else:
                row.update_view(view)

        self.query_one(ActionBar).update_count(snapshot.selected_count)
        if new_rows:
            return container.mount_all(new_rows)
        return None

    def get_row(self, item_id: str) -> ItemRow | None:
        """Get the row widget rendering an item."""
        return self._rows.get(item_id)

    # =========================================================================
    # Actions
    # =========================================================================

    async def action_add_item(self) -> None:
        """Append a new row and focus it."""
        item_id = self.controller.add_item()
        mounted = self.render_snapshot(self.controller.to_snapshot())
        if mounted is not None:
            await mounted
        row = self._rows.get(item_id)
        if row is not None:
            row.focus_input()

    def action_toggle_select(self) -> None:
        """Toggle selection of the row whose field has focus."""
        focused = self.focused
        if not isinstance(focused, ItemInput):
            return
        self.render_snapshot(self.controller.press_toggle_select(focused.item_id))

    def action_delete_selected(self) -> None:
        """Remove all selected rows."""
        if self.controller.selected_count() == 0:
            return
        self.render_snapshot(self.controller.press_delete_selected())

    # =========================================================================
    # Event forwarding
    # =========================================================================

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route action bar buttons."""
        if event.button.id == "add-item":
            event.stop()
            await self.action_add_item()
        elif event.button.id == "delete-selected":
            event.stop()
            self.action_delete_selected()

    def on_item_row_toggle_requested(self, message: ItemRow.ToggleRequested) -> None:
        self.render_snapshot(self.controller.press_toggle_select(message.item_id))

    def on_item_input_focus_changed(self, message: ItemInput.FocusChanged) -> None:
        if message.focused:
            snapshot = self.controller.focus_start(message.item_id)
        else:
            snapshot = self.controller.focus_end(message.item_id)
        self.render_snapshot(snapshot)

    def on_item_input_key_pressed(self, message: ItemInput.KeyPressed) -> None:
        snapshot = self.controller.key_pressed(message.item_id, message.key)
        if message.item_id in self._rows and snapshot.get(message.item_id) is None:
            self.render_snapshot(snapshot)

    def on_input_changed(self, event: Input.Changed) -> None:
        if not isinstance(event.input, ItemInput):
            return
        item_id = event.input.item_id
        self._refresh_row(item_id, self.controller.text_changed(item_id, event.value))

    def _refresh_row(self, item_id: str, snapshot: ChecklistSnapshot) -> None:
        """Re-render one row after a change that only touches that row."""
        row = self._rows.get(item_id)
        view = snapshot.get(item_id)
        if row is not None and view is not None:
            row.update_view(view)
