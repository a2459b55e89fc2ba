"""Headless replay of recorded input events.

An event script is a JSON file of the form::

    {
      "events": [
        {"type": "press_add"},
        {"type": "text_changed", "item_id": "item-1", "text": "Buy milk"},
        {"type": "press_toggle_select", "item_id": "item-1"},
        {"type": "key_pressed", "item_id": "item-1", "key": "backspace"}
      ]
    }

Scripts run against a fresh controller with sequential IDs, so the n-th
added item is always ``item-n``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import dacite

from checklist_editor.exceptions import (
    ScriptLoadError,
    ScriptValidationError,
)
from checklist_editor.ids import SequentialIdGenerator
from checklist_editor.models import (
    AppSettings,
    EventScript,
    EventType,
    InputEvent,
    model_from_dict,
)
from checklist_editor.state import ChecklistSnapshot, ListController

logger = logging.getLogger(__name__)


def parse_script(data: dict) -> EventScript:
    """Decode and validate an event script.

    Raises:
        ScriptValidationError: If the script or any event is malformed.
    """
    try:
        script = model_from_dict(EventScript, data)
    except (dacite.DaciteError, ValueError) as e:
        raise ScriptValidationError(f"Invalid event script: {e}", cause=e) from e

    for index, event in enumerate(script.events):  # type: ignore[attr-defined]
        validate_event(event, index)
    return script  # type: ignore[return-value]


def validate_event(event: InputEvent, index: int) -> None:
    """Check that an event carries the fields its type needs.

    Raises:
        ScriptValidationError: If a required field is missing.
    """
    if event.type.targets_item and not event.item_id:
        raise ScriptValidationError(
            f"Event '{event.type.value}' requires item_id", index=index
        )
    if event.type == EventType.TEXT_CHANGED and event.text is None:
        raise ScriptValidationError("Event 'text_changed' requires text", index=index)
    if event.type == EventType.KEY_PRESSED and not event.key:
        raise ScriptValidationError("Event 'key_pressed' requires key", index=index)


def load_script(path: str | Path) -> EventScript:
    """Read an event script from a JSON file.

    Raises:
        ScriptLoadError: If the file cannot be read or is not UTF-8 JSON.
        ScriptValidationError: If the content is malformed.
    """
    script_path = Path(path)
    try:
        with open(script_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ScriptLoadError(
            f"Invalid JSON in event script at line {e.lineno}",
            file_path=str(script_path),
            context={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e
    except UnicodeDecodeError as e:
        raise ScriptLoadError(
            "Event script is not valid UTF-8",
            file_path=str(script_path),
            context={"position": e.start},
            cause=e,
        ) from e
    except OSError as e:
        raise ScriptLoadError(
            "Failed to read event script",
            file_path=str(script_path),
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise ScriptValidationError("Event script must be a JSON object")
    return parse_script(data)


def replay(
    script: EventScript, settings: AppSettings | None = None
) -> ChecklistSnapshot:
    """Apply every event of a script, in order, to a fresh controller.

    Args:
        script: The events to apply.
        settings: Settings for the controller (delete keys etc.).

    Returns:
        The state after the last event.
    """
    controller = ListController(
        settings=settings or AppSettings(),
        id_generator=SequentialIdGenerator(),
    )
    snapshot = controller.to_snapshot()
    for event in script.events:
        snapshot = controller.dispatch(event)
    logger.info(
        "Replayed %d event(s): %d item(s), %d selected",
        len(script.events),
        len(snapshot),
        snapshot.selected_count,
    )
    return snapshot
