"""Checklist editor.

An editable checklist: append entries, edit their text in place, select
entries and delete one entry or all selected entries at once. The state
machine behind it is usable without the TUI.

Public API Usage:
    from checklist_editor import ListController

    controller = ListController()
    item_id = controller.add_item()
    controller.edit_item(item_id, "Buy milk")
    controller.toggle_select(item_id)
    snapshot = controller.press_delete_selected()
    assert snapshot.selected_count == 0

    # Raw input events return the new state for rendering
    snapshot = controller.key_pressed(item_id, "backspace")
"""

__version__ = "0.1.0"

from checklist_editor.exceptions import (
    ChecklistError,
    ConfigError,
    IllegalSelectionError,
    ItemNotFoundError,
    ScriptError,
)
from checklist_editor.ids import IdGenerator, SequentialIdGenerator, UuidGenerator
from checklist_editor.models import (
    AppConfig,
    AppSettings,
    EditState,
    EventType,
    IdStyle,
    InputEvent,
    Item,
    ItemView,
)
from checklist_editor.state import (
    ChecklistSnapshot,
    KeyAction,
    ListController,
    StateEvent,
    resolve_delete_key,
)

__all__ = [
    "__version__",
    # Controller
    "ListController",
    "ChecklistSnapshot",
    "KeyAction",
    "resolve_delete_key",
    "StateEvent",
    # Models
    "Item",
    "ItemView",
    "EditState",
    "EventType",
    "InputEvent",
    "AppConfig",
    "AppSettings",
    "IdStyle",
    # IDs
    "IdGenerator",
    "UuidGenerator",
    "SequentialIdGenerator",
    # Errors
    "ChecklistError",
    "ConfigError",
    "ItemNotFoundError",
    "IllegalSelectionError",
    "ScriptError",
]
