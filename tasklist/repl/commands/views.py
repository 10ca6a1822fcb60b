"""
FILE: tasklist/repl/commands/views.py
PURPOSE: View command handlers for REPL (by project, by deadline, today)
"""

from datetime import date
from typing import Callable

from ...core.repository import TaskRepository
from ..console import ConsoleIO
from ..display import display_groups
from .base import Command


class ViewByProjectCommand(Command):
    """
    Handle 'view by project' command.

    Prints every project (including empty ones) followed by its tasks.
    """

    def __init__(self, repository: TaskRepository, console: ConsoleIO):
        super().__init__(console)
        self.repository = repository

    def execute(self) -> None:
        display_groups(self.repository.grouped_by_project(), self.console)


class ViewByDeadlineCommand(Command):
    """
    Handle 'view by deadline' command.

    Tasks without a deadline are not shown.
    """

    def __init__(self, repository: TaskRepository, console: ConsoleIO):
        super().__init__(console)
        self.repository = repository

    def execute(self) -> None:
        display_groups(self.repository.grouped_by_deadline(), self.console)


class TodayCommand(Command):
    """
    Handle 'today' command - print descriptions of tasks due today.

    Args:
        today: Callable returning the current date (injectable for tests)
    """

    def __init__(
        self,
        today: Callable[[], date],
        repository: TaskRepository,
        console: ConsoleIO,
    ):
        super().__init__(console)
        self.today = today
        self.repository = repository

    def execute(self) -> None:
        for task in self.repository.tasks_due_on(self.today()):
            self.console.write_line(task.description)
        self.console.write_line()
