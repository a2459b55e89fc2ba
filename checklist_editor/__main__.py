"""Entry point for python -m checklist_editor.

Supports both TUI mode (default) and a headless replay command.

Usage:
    # Launch TUI
    python -m checklist_editor

    # Replay recorded input events and print the resulting list
    python -m checklist_editor replay events.json
    python -m checklist_editor replay events.json --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

logger = logging.getLogger("checklist_editor.cli")


def _setup_logging(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments."""
    from checklist_editor.logging_config import enable_debug_mode, setup_logging

    if args.debug:
        enable_debug_mode(log_to_file=not args.no_log_file)
    else:
        setup_logging(
            level=args.log_level,
            log_to_console=False,
            log_to_file=not args.no_log_file,
        )


def _print_json(data: Any) -> None:
    """Print data as JSON to stdout."""
    print(json.dumps(data, indent=2, default=str))


def _print_table(rows: list[dict[str, Any]], columns: list[str]) -> None:
    """Print data as a simple table."""
    if not rows:
        print("No results.")
        return

    # Calculate column widths
    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            val = str(row.get(col, ""))
            widths[col] = max(widths[col], len(val))

    header = "  ".join(col.ljust(widths[col]) for col in columns)
    print(header)
    print("-" * len(header))

    for row in rows:
        line = "  ".join(str(row.get(col, "")).ljust(widths[col]) for col in columns)
        print(line)


# =============================================================================
# CLI Command Handlers
# =============================================================================


def cmd_replay(args: argparse.Namespace) -> int:
    """Handle replay command."""
    from checklist_editor.config import load_global_config
    from checklist_editor.exceptions import ChecklistError
    from checklist_editor.logging_config import log_exception
    from checklist_editor.replay import load_script, replay

    try:
        settings = load_global_config().settings
        script = load_script(args.file)
    except ChecklistError as e:
        log_exception(logger, e, "Replay aborted", include_traceback=False)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    snapshot = replay(script, settings)
    data = snapshot.to_dict()

    if args.json:
        _print_json(data)
    else:
        rows = [
            {
                "ID": item["id"],
                "Text": item["text"],
                "Selected": "yes" if item["is_selected"] else "",
                "Editing": "yes" if item["is_editing"] else "",
            }
            for item in data["items"]
        ]
        _print_table(rows, ["ID", "Text", "Selected", "Editing"])
        print(f"\n{data['selected_count']} selected")

    return 0


def _create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="checklist-editor",
        description="Editable checklist with selection and bulk delete",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console and file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Disable logging to file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    replay_parser = subparsers.add_parser(
        "replay",
        help="Replay an event script and print the resulting list",
    )
    replay_parser.add_argument(
        "file",
        help="Path to a JSON event script",
    )
    replay_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the checklist editor."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    # Initialize logging
    _setup_logging(args)

    if args.command == "replay":
        return cmd_replay(args)

    # No subcommand - launch TUI
    from checklist_editor.app import ChecklistApp

    app = ChecklistApp()
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
