"""Immutable state snapshot for rendering and external observation.

This module provides a read-only view of the checklist suitable for the
TUI, the replay CLI, and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checklist_editor.models import ItemView


@dataclass(frozen=True)
class ChecklistSnapshot:
    """Immutable snapshot of the checklist state.

    Example:
        controller = ListController()
        snapshot = controller.press_add()
        for row in snapshot.rows:
            print(row.id, row.text, row.is_selected)
    """

    # Rows in display order
    rows: tuple[ItemView, ...] = ()

    # Number of selected items; bulk delete is offered only when non-zero
    selected_count: int = 0

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def ids(self) -> list[str]:
        """Item IDs in display order."""
        return [row.id for row in self.rows]

    @property
    def can_delete_selected(self) -> bool:
        """Whether the bulk delete action is available."""
        return self.selected_count > 0

    def get(self, item_id: str) -> ItemView | None:
        """Get the row for an item, or None if it is not in the list."""
        for row in self.rows:
            if row.id == item_id:
                return row
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "items": [
                {
                    "id": row.id,
                    "text": row.text,
                    "is_selected": row.is_selected,
                    "is_editing": row.is_editing,
                    "can_select": row.can_select,
                }
                for row in self.rows
            ],
            "selected_count": self.selected_count,
        }
