"""Tests for event script loading and replay."""

import json
import tempfile
from pathlib import Path

import pytest

from checklist_editor.exceptions import ScriptLoadError, ScriptValidationError
from checklist_editor.models import AppSettings, EventScript, EventType, InputEvent
from checklist_editor.replay import load_script, parse_script, replay, validate_event

BULK_DELETE_SCRIPT = {
    "events": [
        {"type": "press_add"},
        {"type": "press_add"},
        {"type": "text_changed", "item_id": "item-1", "text": "Buy milk"},
        {"type": "text_changed", "item_id": "item-2", "text": "Walk dog"},
        {"type": "press_toggle_select", "item_id": "item-1"},
        {"type": "press_delete_selected"},
    ]
}


def _write_script(tmpdir: str, content: str) -> Path:
    path = Path(tmpdir) / "events.json"
    path.write_text(content)
    return path


class TestParseScript:
    """Test decoding and validating scripts."""

    def test_parses_events(self):
        script = parse_script(BULK_DELETE_SCRIPT)
        assert len(script.events) == 6
        assert script.events[0].type == EventType.PRESS_ADD
        assert script.events[2].text == "Buy milk"

    def test_empty_script(self):
        assert parse_script({}).events == []

    def test_unknown_event_type(self):
        with pytest.raises(ScriptValidationError):
            parse_script({"events": [{"type": "explode"}]})

    def test_unknown_field(self):
        with pytest.raises(ScriptValidationError):
            parse_script({"events": [{"type": "press_add", "extra": 1}]})

    def test_missing_item_id(self):
        with pytest.raises(ScriptValidationError) as exc_info:
            parse_script(
                {"events": [{"type": "press_add"}, {"type": "focus_start"}]}
            )
        assert exc_info.value.context["index"] == 1

    def test_text_changed_requires_text(self):
        with pytest.raises(ScriptValidationError):
            validate_event(
                InputEvent(type=EventType.TEXT_CHANGED, item_id="item-1"), 0
            )

    def test_text_changed_allows_empty_text(self):
        validate_event(
            InputEvent(type=EventType.TEXT_CHANGED, item_id="item-1", text=""), 0
        )

    def test_key_pressed_requires_key(self):
        with pytest.raises(ScriptValidationError):
            validate_event(InputEvent(type=EventType.KEY_PRESSED, item_id="item-1"), 0)


class TestLoadScript:
    """Test reading scripts from disk."""

    def test_load_valid_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_script(tmpdir, json.dumps(BULK_DELETE_SCRIPT))
            script = load_script(path)
        assert len(script.events) == 6

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(ScriptLoadError):
                load_script(Path(tmpdir) / "nope.json")

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_script(tmpdir, "{oops")
            with pytest.raises(ScriptLoadError) as exc_info:
                load_script(path)
        assert exc_info.value.context["line"] == 1

    def test_non_utf8_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "events.json"
            path.write_bytes(b'{"events": [\xff\xfe]}')
            with pytest.raises(ScriptLoadError) as exc_info:
                load_script(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_non_object(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_script(tmpdir, "[]")
            with pytest.raises(ScriptValidationError):
                load_script(path)


class TestReplay:
    """Test applying scripts."""

    def test_bulk_delete_script(self):
        snapshot = replay(parse_script(BULK_DELETE_SCRIPT))

        assert snapshot.ids == ["item-2"]
        assert snapshot.get("item-2").text == "Walk dog"
        assert snapshot.selected_count == 0

    def test_backspace_policy(self):
        script = parse_script(
            {
                "events": [
                    {"type": "press_add"},
                    {"type": "press_add"},
                    {"type": "press_add"},
                    {"type": "text_changed", "item_id": "item-2", "text": "draft"},
                    {"type": "text_changed", "item_id": "item-3", "text": "draft"},
                    {"type": "press_toggle_select", "item_id": "item-3"},
                    {"type": "key_pressed", "item_id": "item-1", "key": "Backspace"},
                    {"type": "key_pressed", "item_id": "item-2", "key": "Backspace"},
                    {"type": "key_pressed", "item_id": "item-3", "key": "Backspace"},
                ]
            }
        )

        snapshot = replay(script)

        assert snapshot.ids == ["item-2"]

    def test_events_for_removed_items_are_ignored(self):
        script = parse_script(
            {
                "events": [
                    {"type": "press_add"},
                    {"type": "key_pressed", "item_id": "item-1", "key": "backspace"},
                    {"type": "text_changed", "item_id": "item-1", "text": "late"},
                    {"type": "press_add"},
                ]
            }
        )

        snapshot = replay(script)

        assert snapshot.ids == ["item-2"]
        assert snapshot.get("item-2").text == ""

    def test_replay_uses_settings(self):
        script = EventScript(
            events=[
                InputEvent(type=EventType.PRESS_ADD),
                InputEvent(type=EventType.KEY_PRESSED, item_id="item-1", key="backspace"),
            ]
        )

        snapshot = replay(script, AppSettings(delete_keys=["delete"]))

        assert snapshot.ids == ["item-1"]

    def test_replay_is_repeatable(self):
        script = parse_script(BULK_DELETE_SCRIPT)
        assert replay(script) == replay(script)

    def test_editing_state_is_reported(self):
        script = parse_script(
            {
                "events": [
                    {"type": "press_add"},
                    {"type": "focus_start", "item_id": "item-1"},
                ]
            }
        )
        assert replay(script).get("item-1").is_editing
