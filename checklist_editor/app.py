"""Main Textual app class.

This module provides the checklist editor TUI application.
"""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from checklist_editor.config import load_global_config
from checklist_editor.exceptions import ConfigError
from checklist_editor.logging_config import log_exception
from checklist_editor.models import AppConfig
from checklist_editor.screens import ChecklistScreen
from checklist_editor.state import (
    ItemAdded,
    ItemRemoved,
    ListController,
    SelectionChanged,
)

logger = logging.getLogger(__name__)


class ChecklistApp(App):
    """Checklist editor TUI application."""

    TITLE = "Checklist"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: AppConfig | None = None) -> None:
        """Initialize the application.

        Args:
            config: Configuration to use. Loaded from disk when omitted.
        """
        super().__init__()
        self._config_error: ConfigError | None = None
        if config is None:
            config = self._load_config()
        self.config = config

        self.controller = ListController(settings=config.settings)
        self.controller.connect_app(self)  # Connect state to app for message posting

    def _load_config(self) -> AppConfig:
        """Load the global config, falling back to defaults on errors."""
        try:
            return load_global_config()
        except ConfigError as e:
            log_exception(
                logger,
                e,
                "Using default configuration",
                level=logging.WARNING,
                include_traceback=False,
            )
            self._config_error = e
            return AppConfig()

    def on_mount(self) -> None:
        """Show the checklist screen."""
        if self._config_error is not None:
            self.notify(
                f"Config error, using defaults: {self._config_error}",
                severity="warning",
            )
        placeholder = self.config.settings.placeholder
        self.push_screen(ChecklistScreen(self.controller, placeholder=placeholder))

    def on_item_added(self, message: ItemAdded) -> None:
        logger.debug("Item added: %s", message.item.id)

    def on_item_removed(self, message: ItemRemoved) -> None:
        logger.debug("Item removed: %s", message.item.id)

    def on_selection_changed(self, message: SelectionChanged) -> None:
        """Show the selection count in the header."""
        count = message.selected_count
        self.sub_title = f"{count} selected" if count else ""
