"""Screen components for the TUI."""

from checklist_editor.screens.checklist import ChecklistScreen

__all__ = ["ChecklistScreen"]
