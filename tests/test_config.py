"""Tests for configuration loading and saving."""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from checklist_editor.config import (
    CONFIG_DIR,
    GLOBAL_CONFIG_PATH,
    get_config_dir,
    get_global_config_path,
    load_config_from_dict,
    load_global_config,
    save_global_config,
)
from checklist_editor.exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
)
from checklist_editor.models import AppConfig, AppSettings, IdStyle


def _patched_paths(tmpdir: str):
    config_dir = Path(tmpdir) / "checklist-editor"
    config_path = config_dir / "config.json"
    return (
        patch("checklist_editor.config.CONFIG_DIR", config_dir),
        patch("checklist_editor.config.GLOBAL_CONFIG_PATH", config_path),
        config_path,
    )


class TestLoadGlobalConfig:
    """Test loading the global config file."""

    def test_missing_file_returns_defaults(self):
        """A missing config file yields the default config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, _ = _patched_paths(tmpdir)
            with dir_patch, path_patch:
                config = load_global_config()
        assert config == AppConfig()

    def test_loads_settings(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            config_path.parent.mkdir(parents=True)
            config_path.write_text(
                json.dumps(
                    {
                        "settings": {
                            "placeholder": "Todo",
                            "delete_keys": ["backspace", "delete"],
                            "id_style": "sequential",
                        }
                    }
                )
            )
            with dir_patch, path_patch:
                config = load_global_config()

        assert config.settings.placeholder == "Todo"
        assert config.settings.delete_keys == ["backspace", "delete"]
        assert config.settings.id_style == IdStyle.SEQUENTIAL

    def test_partial_settings_use_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            config_path.parent.mkdir(parents=True)
            config_path.write_text(json.dumps({"settings": {"placeholder": "Todo"}}))
            with dir_patch, path_patch:
                config = load_global_config()

        assert config.settings.delete_keys == ["backspace"]

    def test_invalid_json_raises_load_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            config_path.parent.mkdir(parents=True)
            config_path.write_text("{not json")
            with dir_patch, path_patch:
                with pytest.raises(ConfigLoadError) as exc_info:
                    load_global_config()

        assert exc_info.value.context["line"] == 1
        assert "file_path" in exc_info.value.context

    def test_non_utf8_file_raises_load_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            config_path.parent.mkdir(parents=True)
            config_path.write_bytes(b"\xff\xfe{}")
            with dir_patch, path_patch:
                with pytest.raises(ConfigLoadError) as exc_info:
                    load_global_config()

        assert exc_info.value.context["position"] == 0
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_non_object_raises_validation_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            config_path.parent.mkdir(parents=True)
            config_path.write_text("[1, 2]")
            with dir_patch, path_patch:
                with pytest.raises(ConfigValidationError):
                    load_global_config()


class TestLoadConfigFromDict:
    """Test schema validation of config data."""

    def test_wrong_type_raises(self):
        with pytest.raises(ConfigValidationError):
            load_config_from_dict({"settings": {"delete_keys": "backspace"}})

    def test_unknown_enum_value_raises(self):
        with pytest.raises(ConfigValidationError):
            load_config_from_dict({"settings": {"id_style": "random"}})

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigValidationError):
            load_config_from_dict({"settings": {"colour": "red"}})

    def test_empty_dict_is_default(self):
        assert load_config_from_dict({}) == AppConfig()


class TestSaveGlobalConfig:
    """Test saving the global config file."""

    def test_save_then_load(self):
        config = AppConfig(
            settings=AppSettings(placeholder="Todo", id_style=IdStyle.SEQUENTIAL)
        )
        with tempfile.TemporaryDirectory() as tmpdir:
            dir_patch, path_patch, config_path = _patched_paths(tmpdir)
            with dir_patch, path_patch:
                save_global_config(config)
                assert config_path.exists()
                data = json.loads(config_path.read_text())
                loaded = load_global_config()

        assert data["settings"]["id_style"] == "sequential"
        assert loaded == config

    def test_save_failure_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            blocker = Path(tmpdir) / "file"
            blocker.write_text("")
            config_dir = blocker / "sub"
            with patch("checklist_editor.config.CONFIG_DIR", config_dir), patch(
                "checklist_editor.config.GLOBAL_CONFIG_PATH", config_dir / "c.json"
            ):
                with pytest.raises(ConfigSaveError):
                    save_global_config(AppConfig())


class TestPaths:
    """Test path helpers."""

    def test_paths(self):
        assert get_config_dir() == CONFIG_DIR
        assert get_global_config_path() == GLOBAL_CONFIG_PATH
        assert GLOBAL_CONFIG_PATH.name == "config.json"
        assert CONFIG_DIR.name == "checklist-editor"
