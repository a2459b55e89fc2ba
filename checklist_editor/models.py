"""Core dataclasses for items, row views, input events and configuration.

Configuration and event-script models are designed for JSON
serialization using dacite.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

import dacite


# =============================================================================
# Item Models
# =============================================================================


class EditState(Enum):
    """Transient editing status of an item's text field."""

    IDLE = "idle"  # Not focused, not receiving keystrokes
    EDITING = "editing"  # Focused, text field active


@dataclass
class Item:
    """A single checklist entry."""

    id: str  # Assigned once at creation
    text: str = ""


@dataclass(frozen=True)
class ItemView:
    """Render-ready view of one item."""

    id: str
    text: str
    is_selected: bool = False
    is_editing: bool = False

    @property
    def can_select(self) -> bool:
        """Only items with text may be selected."""
        return self.text != ""


# =============================================================================
# Input Event Models
# =============================================================================


class EventType(Enum):
    """Raw input events forwarded by the presentation layer."""

    FOCUS_START = "focus_start"
    FOCUS_END = "focus_end"
    TEXT_CHANGED = "text_changed"
    KEY_PRESSED = "key_pressed"
    PRESS_ADD = "press_add"
    PRESS_DELETE_SELECTED = "press_delete_selected"
    PRESS_TOGGLE_SELECT = "press_toggle_select"

    @property
    def targets_item(self) -> bool:
        """Whether the event refers to a specific item."""
        return self not in (EventType.PRESS_ADD, EventType.PRESS_DELETE_SELECTED)


@dataclass
class InputEvent:
    """One recorded input event, as found in an event script."""

    type: EventType
    item_id: str | None = None
    text: str | None = None
    key: str | None = None


@dataclass
class EventScript:
    """An ordered list of input events to replay."""

    events: list[InputEvent] = field(default_factory=list)


# =============================================================================
# Configuration Models
# =============================================================================


class IdStyle(Enum):
    """Which identifier generator new items use."""

    UUID = "uuid"
    SEQUENTIAL = "sequential"


@dataclass
class AppSettings:
    """Global application settings."""

    placeholder: str = "New Item"
    delete_keys: list[str] = field(default_factory=lambda: ["backspace"])
    id_style: IdStyle = IdStyle.UUID


@dataclass
class AppConfig:
    """Complete application configuration."""

    settings: AppSettings = field(default_factory=AppSettings)


# =============================================================================
# Serialization Helpers
# =============================================================================


def _convert_enums(obj: object) -> object:
    """Recursively convert Enum values to their string values."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _convert_enums(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_enums(v) for v in obj]
    return obj


def model_to_dict(obj: object) -> dict:
    """Convert a dataclass model to a dictionary for JSON serialization."""
    data = asdict(obj)  # type: ignore[arg-type]
    return _convert_enums(data)  # type: ignore[return-value]


def model_from_dict(data_class: type, data: dict, *, strict: bool = True) -> object:
    """Load a dataclass model from a dictionary.

    Enum fields are cast from their string values. With ``strict`` set,
    unknown keys are rejected.

    Raises:
        dacite.DaciteError: On missing fields, wrong types or unknown keys.
        ValueError: On an enum value that does not exist.
    """
    return dacite.from_dict(
        data_class=data_class,
        data=data,
        config=dacite.Config(cast=[Enum], strict=strict),
    )
