"""Bottom action bar with bulk delete and add buttons."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button


class ActionBar(Horizontal):
    """Shows "Delete (n)" and "Add New".

    The delete button is disabled while nothing is selected.
    """

    DEFAULT_CSS = """
    ActionBar {
        dock: bottom;
        height: auto;
        padding: 1 1 0 1;
        background: $boost;
    }

    ActionBar Button {
        width: 1fr;
        margin: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Button(
            "Delete (0)", id="delete-selected", variant="error", disabled=True
        )
        yield Button("Add New", id="add-item", variant="primary")

    def update_count(self, selected_count: int) -> None:
        """Reflect the number of selected items on the delete button."""
        button = self.query_one("#delete-selected", Button)
        button.label = f"Delete ({selected_count})"
        button.disabled = selected_count <= 0
