"""
FILE: tasklist/repl/display.py
PURPOSE: Render grouped task data in the fixed text layout
EXPORTS:
  - format_task_line(task) -> str
  - display_groups(groups, console) - one heading per group, then its tasks
DEPENDENCIES:
  - tasklist.core.models (Task model)
  - tasklist.core.constants (TASK_LINE_FORMAT)
NOTES:
  - Layout:
        <heading>
            [x] <id>: <description>
            [ ] <id>: <description>
        <blank line>
  - Empty groups still get the trailing blank line
"""

from typing import Dict, List

from ..core.constants import TASK_LINE_FORMAT
from ..core.models import Task
from .console import ConsoleIO


def format_task_line(task: Task) -> str:
    """Format one task as '    [x] <id>: <description>'."""
    return TASK_LINE_FORMAT.format(
        mark="x" if task.done else " ",
        id=task.id,
        description=task.description,
    )


def display_groups(groups: Dict[str, List[Task]], console: ConsoleIO) -> None:
    """
    Print each group heading followed by its tasks and a blank line.

    Args:
        groups: Ordered mapping of heading (project name or date) to tasks
        console: Console to write to
    """
    for heading, tasks in groups.items():
        console.write_line(heading)
        for task in tasks:
            console.write_line(format_task_line(task))
        console.write_line()
