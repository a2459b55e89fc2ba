"""Custom exception hierarchy for the checklist editor.

Core list operations are total and never raise to the user; the item
errors below are raised by strict lookups and caught by the controller,
which turns them into no-ops. Configuration and script errors propagate
to the CLI and TUI entry points.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class ChecklistError(Exception):
    """Base exception for all checklist editor errors.

    Attributes:
        message: Human-readable error description.
        context: Additional context for debugging.
        timestamp: When the error occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        self.timestamp = datetime.now()
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Item Errors
# =============================================================================


class ItemError(ChecklistError):
    """Base class for item-related errors."""

    pass


class ItemNotFoundError(ItemError):
    """Raised when an item ID does not exist in the store."""

    def __init__(self, item_id: str, *, operation: str | None = None) -> None:
        ctx: dict[str, Any] = {"item_id": item_id}
        if operation:
            ctx["operation"] = operation
        super().__init__("Item not found", context=ctx)
        self.item_id = item_id


class IllegalSelectionError(ItemError):
    """Raised when selecting an item whose text is empty."""

    def __init__(self, item_id: str) -> None:
        super().__init__(
            "Cannot select an item with empty text",
            context={"item_id": item_id},
        )
        self.item_id = item_id


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(ChecklistError):
    """Base class for configuration-related errors."""

    pass


class ConfigLoadError(ConfigError):
    """Raised when configuration file fails to load."""

    def __init__(
        self,
        message: str = "Failed to load configuration",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str = "Configuration validation failed",
        *,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ConfigSaveError(ConfigError):
    """Raised when configuration file fails to save."""

    def __init__(
        self,
        message: str = "Failed to save configuration",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Event Script Errors
# =============================================================================


class ScriptError(ChecklistError):
    """Base class for event script errors."""

    pass


class ScriptLoadError(ScriptError):
    """Raised when an event script cannot be read or parsed."""

    def __init__(
        self,
        message: str = "Failed to load event script",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ScriptValidationError(ScriptError):
    """Raised when an event in a script is malformed."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if index is not None:
            ctx["index"] = index
        super().__init__(message, context=ctx, cause=cause)
