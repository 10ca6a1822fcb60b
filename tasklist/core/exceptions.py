"""
FILE: tasklist/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TaskListError (base exception)
  - TaskNotFoundError
  - ProjectNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TaskListError for easy catching
  - Exceptions include context (IDs, names) for helpful error messages
  - Repository raises these, commands catch and print them
"""


class TaskListError(Exception):
    """Base exception for all tasklist errors."""
    pass


class TaskNotFoundError(TaskListError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Could not find a task with an ID of {task_id}.")


class ProjectNotFoundError(TaskListError):
    """Project with given name doesn't exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Could not find a project with the name "{name}".')


class InvalidInputError(TaskListError):
    """Input validation failed (missing argument, bad date, empty ID)."""

    def __init__(self, message: str):
        super().__init__(message)
