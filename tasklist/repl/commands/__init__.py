"""
FILE: tasklist/repl/commands/__init__.py
PURPOSE: REPL command classes
"""

# Export all commands for easy importing
from .base import Command
from .projects import AddProjectCommand
from .tasks import (
    AddTaskCommand,
    CheckCommand,
    UncheckCommand,
    DeadlineCommand,
    IdCommand,
    DeleteCommand,
)
from .views import (
    ViewByProjectCommand,
    ViewByDeadlineCommand,
    TodayCommand,
)
from .system import (
    HelpCommand,
    QuitCommand,
    ErrorCommand,
)

__all__ = [
    "Command",
    "AddProjectCommand",
    "AddTaskCommand",
    "CheckCommand",
    "UncheckCommand",
    "DeadlineCommand",
    "IdCommand",
    "DeleteCommand",
    "ViewByProjectCommand",
    "ViewByDeadlineCommand",
    "TodayCommand",
    "HelpCommand",
    "QuitCommand",
    "ErrorCommand",
]
