"""Tests for custom exception hierarchy."""

import pytest

from checklist_editor.exceptions import (
    ChecklistError,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
    IllegalSelectionError,
    ItemError,
    ItemNotFoundError,
    ScriptError,
    ScriptLoadError,
    ScriptValidationError,
)


class TestExceptionHierarchy:
    """Test that exceptions are properly organized in hierarchy."""

    def test_base_exception_properties(self):
        """ChecklistError has expected properties."""
        exc = ChecklistError("test message", context={"key": "value"})
        assert exc.message == "test message"
        assert exc.context == {"key": "value"}
        assert exc.timestamp is not None
        assert exc.cause is None

    def test_base_exception_with_cause(self):
        cause = ValueError("root")
        exc = ChecklistError("wrapped", cause=cause)
        assert exc.cause is cause

    def test_str_includes_context(self):
        exc = ChecklistError("failed", context={"a": 1, "b": "x"})
        assert str(exc) == "failed (a=1, b=x)"

    def test_str_without_context(self):
        assert str(ChecklistError("failed")) == "failed"

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (ItemError, ChecklistError),
            (ItemNotFoundError, ItemError),
            (IllegalSelectionError, ItemError),
            (ConfigError, ChecklistError),
            (ConfigLoadError, ConfigError),
            (ConfigSaveError, ConfigError),
            (ConfigValidationError, ConfigError),
            (ScriptError, ChecklistError),
            (ScriptLoadError, ScriptError),
            (ScriptValidationError, ScriptError),
        ],
    )
    def test_hierarchy(self, exc_class, parent):
        assert issubclass(exc_class, parent)


class TestItemErrors:
    """Test item error context."""

    def test_item_not_found(self):
        exc = ItemNotFoundError("abc", operation="toggle_select")
        assert exc.item_id == "abc"
        assert exc.context == {"item_id": "abc", "operation": "toggle_select"}
        assert "Item not found" in str(exc)

    def test_item_not_found_without_operation(self):
        assert ItemNotFoundError("abc").context == {"item_id": "abc"}

    def test_illegal_selection(self):
        exc = IllegalSelectionError("abc")
        assert exc.item_id == "abc"
        assert "empty text" in exc.message


class TestConfigAndScriptErrors:
    """Test default messages and file path context."""

    def test_config_load_error_defaults(self):
        exc = ConfigLoadError(file_path="/tmp/config.json")
        assert exc.message == "Failed to load configuration"
        assert exc.context["file_path"] == "/tmp/config.json"

    def test_config_save_error_defaults(self):
        assert ConfigSaveError().message == "Failed to save configuration"

    def test_script_validation_error_index(self):
        exc = ScriptValidationError("bad event", index=3)
        assert exc.context == {"index": 3}
        assert str(exc) == "bad event (index=3)"

    def test_script_load_error_file_path(self):
        exc = ScriptLoadError(file_path="events.json")
        assert exc.context["file_path"] == "events.json"

