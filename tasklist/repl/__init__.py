"""
FILE: tasklist/repl/__init__.py
PURPOSE: REPL package for interactive task management
EXPORTS:
  - main() (from repl.main)
  - TaskListSession (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (terminal output)
  - tasklist.core.repository (task store)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete and command history on a TTY
"""

from .main import main, TaskListSession

__all__ = ["main", "TaskListSession"]
