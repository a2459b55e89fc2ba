"""Custom widgets for the checklist TUI."""

from checklist_editor.widgets.action_bar import ActionBar
from checklist_editor.widgets.item_row import ItemInput, ItemRow, SelectToggle

__all__ = [
    "ActionBar",
    "ItemInput",
    "ItemRow",
    "SelectToggle",
]
