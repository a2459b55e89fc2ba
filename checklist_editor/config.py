"""Config loading/saving and paths.

Configuration lives in a single JSON file; a missing file means defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import dacite

from .exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
)
from .models import AppConfig, model_from_dict, model_to_dict

logger = logging.getLogger(__name__)

# Configuration file locations
CONFIG_DIR = Path.home() / ".config" / "checklist-editor"
GLOBAL_CONFIG_PATH = CONFIG_DIR / "config.json"


def load_config_from_dict(data: dict) -> AppConfig:
    """Load AppConfig from a dictionary (parsed JSON).

    Raises:
        ConfigValidationError: If the data does not match the schema.
    """
    try:
        return model_from_dict(AppConfig, data)  # type: ignore[return-value]
    except (dacite.DaciteError, ValueError) as e:
        # ValueError covers enum casts of unknown values
        logger.error("Config schema validation failed: %s", e)
        raise ConfigValidationError(
            f"Config schema validation failed: {e}",
            cause=e,
        ) from e


def load_global_config() -> AppConfig:
    """
    Load global application configuration.

    Loads from ~/.config/checklist-editor/config.json if it exists,
    otherwise returns a default AppConfig.

    Returns:
        AppConfig instance with global settings

    Raises:
        ConfigLoadError: If the config file exists but cannot be read or
            decoded.
        ConfigValidationError: If the config does not match the schema.
    """
    if not GLOBAL_CONFIG_PATH.exists():
        logger.debug("No global config found, using defaults")
        return AppConfig()

    try:
        with open(GLOBAL_CONFIG_PATH, encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loaded global config from %s", GLOBAL_CONFIG_PATH)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in config file: %s", e)
        raise ConfigLoadError(
            f"Invalid JSON in config file at line {e.lineno}",
            file_path=str(GLOBAL_CONFIG_PATH),
            context={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e
    except UnicodeDecodeError as e:
        logger.error("Config file is not UTF-8: %s", e)
        raise ConfigLoadError(
            "Config file is not valid UTF-8",
            file_path=str(GLOBAL_CONFIG_PATH),
            context={"position": e.start},
            cause=e,
        ) from e
    except OSError as e:
        logger.error("Failed to read config file: %s", e)
        raise ConfigLoadError(
            "Failed to read config file",
            file_path=str(GLOBAL_CONFIG_PATH),
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            "Config file must contain a JSON object",
            context={"file_path": str(GLOBAL_CONFIG_PATH)},
        )
    return load_config_from_dict(data)


def save_global_config(config: AppConfig) -> None:
    """
    Save global application configuration.

    Saves to ~/.config/checklist-editor/config.json, creating the
    directory if needed.

    Args:
        config: AppConfig instance to save

    Raises:
        ConfigSaveError: If the config cannot be saved.
    """
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create config directory: %s", e)
        raise ConfigSaveError(
            f"Failed to create config directory: {CONFIG_DIR}",
            file_path=str(CONFIG_DIR),
            cause=e,
        ) from e

    try:
        data = model_to_dict(config)
        with open(GLOBAL_CONFIG_PATH, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("Saved global config to %s", GLOBAL_CONFIG_PATH)
    except OSError as e:
        logger.error("Failed to write config file: %s", e)
        raise ConfigSaveError(
            "Failed to write config file",
            file_path=str(GLOBAL_CONFIG_PATH),
            cause=e,
        ) from e


def get_global_config_path() -> Path:
    """Return the path to the global config file."""
    return GLOBAL_CONFIG_PATH


def get_config_dir() -> Path:
    """Return the path to the config directory."""
    return CONFIG_DIR
