"""
FILE: tasklist/core/models.py
PURPOSE: Domain models for task identifiers, tasks, and projects
EXPORTS:
  - TaskId (frozen value wrapper around the textual identifier)
  - Task (dataclass)
  - Project (dataclass)
  - parse_date(text) -> date
  - format_date(day) -> str
DEPENDENCIES:
  - dataclasses (stdlib)
  - datetime (stdlib)
  - typing (stdlib)
  - tasklist.core.constants (DATE_FORMAT)
  - tasklist.core.exceptions (InvalidInputError)
NOTES:
  - Identifiers are opaque text: "1", "42" and "foo" are all valid
  - Deadlines are datetime.date values, never datetimes
  - A Project owns its tasks list; tasks are never shared between projects
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from .constants import DATE_FORMAT
from .exceptions import InvalidInputError


@dataclass(frozen=True)
class TaskId:
    """Opaque identifier of a task."""

    value: str

    @classmethod
    def parse(cls, text: str) -> "TaskId":
        """
        Build a TaskId from user input.

        Raises:
            InvalidInputError: If text is empty or whitespace-only
        """
        value = (text or "").strip()
        if not value:
            raise InvalidInputError("Task ID cannot be empty")
        return cls(value)

    def __str__(self) -> str:
        return self.value


def parse_date(text: str) -> date:
    """
    Parse a dd.mm.yyyy deadline.

    Raises:
        InvalidInputError: If text is not a valid calendar date in that format
    """
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError(f"Invalid date '{text}'. Expected dd.mm.yyyy")


def format_date(day: date) -> str:
    """Format a deadline as dd.mm.yyyy."""
    return day.strftime(DATE_FORMAT)


@dataclass
class Task:
    """A task with description, completion flag, and optional deadline."""

    id: TaskId
    description: str
    done: bool = False
    deadline: Optional[date] = None


@dataclass
class Project:
    """A named project holding tasks in insertion order."""

    name: str
    tasks: List[Task] = field(default_factory=list)
