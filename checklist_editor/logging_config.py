"""Logging setup for the checklist editor.

The TUI owns the terminal, so records normally go only to a rotating file
under ``~/.config/checklist-editor/logs``. ``--debug`` adds stderr output.
Modules log through ``logging.getLogger(__name__)``, which places them
under the ``checklist_editor`` logger configured here.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

PACKAGE_LOGGER = "checklist_editor"

DEFAULT_LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 2

LOG_DIR = Path.home() / ".config" / "checklist-editor" / "logs"
LOG_FILE_NAME = "checklist-editor.log"


def get_log_file_path() -> Path:
    """Path of the active log file; the directory is created on demand."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR / LOG_FILE_NAME


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def _build_handlers(
    *,
    log_to_file: bool,
    log_to_console: bool,
    console_stream: TextIO | None,
    max_bytes: int,
    backup_count: int,
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if log_to_file:
        handlers.append(
            RotatingFileHandler(
                get_log_file_path(),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )
    if log_to_console:
        handlers.append(logging.StreamHandler(console_stream or sys.stderr))
    return handlers


def setup_logging(
    *,
    level: int | str = DEFAULT_LOG_LEVEL,
    log_to_file: bool = True,
    log_to_console: bool = False,
    console_stream: TextIO | None = None,
    max_bytes: int = MAX_LOG_BYTES,
    backup_count: int = LOG_BACKUPS,
    debug_modules: list[str] | None = None,
) -> None:
    """(Re)configure the package logger.

    Handlers from an earlier call are closed and replaced, so calling
    this twice never duplicates output.

    Args:
        level: Level name ("debug", "INFO", ...) or numeric level. Unknown
            names fall back to INFO.
        log_to_file: Write to the rotating log file.
        log_to_console: Write to ``console_stream`` (stderr by default).
        console_stream: Stream for console output.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files to keep.
        debug_modules: Submodules (e.g. "state.controller") forced to DEBUG.
    """
    numeric_level = _resolve_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in _build_handlers(
        log_to_file=log_to_file,
        log_to_console=log_to_console,
        console_stream=console_stream,
        max_bytes=max_bytes,
        backup_count=backup_count,
    ):
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    for module_name in debug_modules or []:
        logging.getLogger(_qualify(module_name)).setLevel(logging.DEBUG)


def _qualify(name: str) -> str:
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return name
    return f"{PACKAGE_LOGGER}.{name}"


def enable_debug_mode(*, log_to_file: bool = True) -> None:
    """Log everything at DEBUG to stderr and, unless disabled, the file."""
    setup_logging(level=logging.DEBUG, log_to_console=True, log_to_file=log_to_file)


def log_exception(
    logger: logging.Logger,
    exc: BaseException,
    message: str,
    *,
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """Log ``message: exc`` with or without the traceback.

    Without the traceback the exception type is appended instead.
    """
    if include_traceback:
        logger.log(level, "%s: %s", message, exc, exc_info=exc)
    else:
        logger.log(level, "%s: %s (%s)", message, exc, type(exc).__name__)
