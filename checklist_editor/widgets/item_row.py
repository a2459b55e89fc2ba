"""Checklist row widget.

A row is a select toggle next to a single-line text field. The row holds
no state of its own beyond what it last rendered: focus, key and change
events are forwarded as messages and the screen re-renders the row from
the controller's snapshot.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Input, Static

from checklist_editor.models import ItemView

CHECKED_BOX = "■"
UNCHECKED_BOX = "□"
DISABLED_BOX = "⬚"


class SelectToggle(Static):
    """Square toggle marking an item as selected.

    Disabled (dashed box) while the item's text is empty.
    """

    DEFAULT_CSS = """
    SelectToggle {
        width: 3;
        height: 1;
        margin-top: 1;
    }
    """

    class Pressed(Message):
        """Posted when an enabled toggle is clicked."""

        def __init__(self, toggle: SelectToggle) -> None:
            super().__init__()
            self.toggle = toggle

    def __init__(
        self, *, checked: bool = False, enabled: bool = False, **kwargs: Any
    ) -> None:
        super().__init__("", **kwargs)
        self.is_checked = checked
        self.is_enabled = enabled

    def on_mount(self) -> None:
        self.update(self._render_box())

    def set_state(self, *, checked: bool, enabled: bool) -> None:
        """Update what the toggle shows."""
        self.is_checked = checked
        self.is_enabled = enabled
        self.update(self._render_box())

    def _render_box(self) -> Text:
        if self.is_checked:
            return Text(CHECKED_BOX, style="bold cyan")
        if not self.is_enabled:
            return Text(DISABLED_BOX, style="dim")
        return Text(UNCHECKED_BOX)

    def on_click(self, event: events.Click) -> None:
        event.stop()
        if self.is_enabled:
            self.post_message(self.Pressed(self))


class ItemInput(Input):
    """Text field bound to one item ID."""

    class FocusChanged(Message):
        """Posted when the field gains or loses focus."""

        def __init__(self, item_id: str, focused: bool) -> None:
            super().__init__()
            self.item_id = item_id
            self.focused = focused

    class KeyPressed(Message):
        """Posted for every key before the field handles it."""

        def __init__(self, item_id: str, key: str) -> None:
            super().__init__()
            self.item_id = item_id
            self.key = key

    def __init__(self, item_id: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.item_id = item_id

    def on_focus(self, event: events.Focus) -> None:
        self.post_message(self.FocusChanged(self.item_id, True))

    def on_blur(self, event: events.Blur) -> None:
        self.post_message(self.FocusChanged(self.item_id, False))

    def on_key(self, event: events.Key) -> None:
        self.post_message(self.KeyPressed(self.item_id, event.key))


class ItemRow(Horizontal):
    """One checklist entry."""

    DEFAULT_CSS = """
    ItemRow {
        height: auto;
        padding: 0 2;
        border-bottom: solid $panel-lighten-1;
    }

    ItemRow ItemInput {
        width: 1fr;
        border: none;
    }

    ItemRow.-selected ItemInput {
        text-style: strike;
    }
    """

    class ToggleRequested(Message):
        """Posted when the user asks to flip the row's selection."""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    def __init__(self, view: ItemView, placeholder: str = "New Item") -> None:
        """Initialize the row.

        Args:
            view: The item's state at creation time.
            placeholder: Text shown while the field is empty.
        """
        super().__init__(classes="-selected" if view.is_selected else "")
        self.item_id = view.id
        self._view = view
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        yield SelectToggle(
            checked=self._view.is_selected, enabled=self._view.can_select
        )
        yield ItemInput(
            self.item_id,
            value=self._view.text,
            placeholder=self._placeholder,
        )

    @property
    def view(self) -> ItemView:
        """The state this row last rendered."""
        return self._view

    def update_view(self, view: ItemView) -> None:
        """Re-render selection and toggle availability.

        The field's text is left alone: the field is where text changes
        come from, and resetting it would move the cursor.
        """
        self._view = view
        self.set_class(view.is_selected, "-selected")
        try:
            toggle = self.query_one(SelectToggle)
        except NoMatches:
            # Not composed yet; compose() uses the stored view
            return
        toggle.set_state(checked=view.is_selected, enabled=view.can_select)

    def focus_input(self) -> None:
        """Move focus into the row's text field."""
        self.query_one(ItemInput).focus()

    def on_select_toggle_pressed(self, message: SelectToggle.Pressed) -> None:
        message.stop()
        self.post_message(self.ToggleRequested(self.item_id))
