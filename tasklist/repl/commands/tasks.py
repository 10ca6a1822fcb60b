"""
FILE: tasklist/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL
"""

from datetime import date

from ...core.exceptions import ProjectNotFoundError, TaskNotFoundError
from ...core.models import TaskId
from ...core.repository import TaskRepository
from ..console import ConsoleIO
from .base import Command


class AddTaskCommand(Command):
    """
    Handle 'add task' command - create a task in an existing project.

    Usage:
        add task secrets Eat more donuts.
    """

    def __init__(
        self,
        project_name: str,
        description: str,
        repository: TaskRepository,
        console: ConsoleIO,
    ):
        super().__init__(console)
        self.project_name = project_name
        self.description = description
        self.repository = repository

    def execute(self) -> None:
        try:
            self.repository.add_task(self.project_name, self.description)
        except ProjectNotFoundError as e:
            self.console.write_line(str(e))


class SetDoneCommand(Command):
    """Shared implementation of 'check' and 'uncheck'."""

    done = True

    def __init__(self, task_id: TaskId, repository: TaskRepository, console: ConsoleIO):
        super().__init__(console)
        self.task_id = task_id
        self.repository = repository

    def execute(self) -> None:
        try:
            self.repository.set_done(self.task_id, self.done)
        except TaskNotFoundError as e:
            self.console.write_line(str(e))


class CheckCommand(SetDoneCommand):
    """
    Handle 'check' command - mark task done.

    Usage:
        check 1
    """

    done = True


class UncheckCommand(SetDoneCommand):
    """
    Handle 'uncheck' command - mark task not done.

    Usage:
        uncheck 1
    """

    done = False


class DeadlineCommand(Command):
    """
    Handle 'deadline' command - set a task's deadline.

    Usage:
        deadline 1 10.10.2020
    """

    def __init__(
        self,
        task_id: TaskId,
        deadline: date,
        repository: TaskRepository,
        console: ConsoleIO,
    ):
        super().__init__(console)
        self.task_id = task_id
        self.deadline = deadline
        self.repository = repository

    def execute(self) -> None:
        try:
            self.repository.set_deadline(self.task_id, self.deadline)
        except TaskNotFoundError:
            self.console.write_line(f'Could not find a task with the id "{self.task_id}".')


class IdCommand(Command):
    """
    Handle 'id' command - give a task a new ID.

    Usage:
        id 9 foo

    Notes:
        - Renaming onto an ID held by another task is rejected
        - Renaming a task to its own ID is a no-op
    """

    def __init__(
        self,
        old_id: TaskId,
        new_id: TaskId,
        repository: TaskRepository,
        console: ConsoleIO,
    ):
        super().__init__(console)
        self.old_id = old_id
        self.new_id = new_id
        self.repository = repository

    def execute(self) -> None:
        task = self.repository.find_task_by_id(self.old_id)
        if task is None:
            self.console.write_line(str(TaskNotFoundError(self.old_id)))
            return

        holder = self.repository.find_task_by_id(self.new_id)
        if holder is not None and holder is not task:
            self.console.write_line(f"A task with an ID of {self.new_id} already exists.")
            return

        self.repository.rename_id(self.old_id, self.new_id)


class DeleteCommand(Command):
    """
    Handle 'delete' command - remove a task. Unknown IDs are ignored.

    Usage:
        delete 10
    """

    def __init__(self, task_id: TaskId, repository: TaskRepository, console: ConsoleIO):
        super().__init__(console)
        self.task_id = task_id
        self.repository = repository

    def execute(self) -> None:
        self.repository.delete_task_by_id(self.task_id)
