"""
FILE: tasklist/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - TaskListCompleter (Completer for command/arg completion)
  - create_completer(repository) -> TaskListCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - tasklist.core.repository (for task IDs and project names)
NOTES:
  - Suggests whole keywords ("view by project") while the first words are typed
  - Suggests task IDs for commands expecting an ID first
  - Suggests project names after "add task"
  - Case-insensitive matching
"""

from typing import Iterable, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core import constants
from ..core.repository import TaskRepository


class TaskListCompleter(Completer):
    """
    Custom completer for the tasklist REPL.

    Provides context-aware autocomplete:
    - Command keywords at start of input
    - Task IDs after check/uncheck/deadline/id/delete
    - Project names after "add task"
    """

    # Available commands, in the order shown by help
    COMMANDS = [
        constants.CMD_VIEW_BY_PROJECT,
        constants.CMD_VIEW_BY_DEADLINE,
        constants.CMD_ADD_PROJECT,
        constants.CMD_ADD_TASK,
        constants.CMD_CHECK,
        constants.CMD_UNCHECK,
        constants.CMD_DEADLINE,
        constants.CMD_TODAY,
        constants.CMD_ID,
        constants.CMD_DELETE,
        constants.CMD_HELP,
        constants.CMD_QUIT,
    ]

    # Commands whose first argument is a task ID
    ID_FIRST_COMMANDS = {
        constants.CMD_CHECK,
        constants.CMD_UNCHECK,
        constants.CMD_DEADLINE,
        constants.CMD_ID,
        constants.CMD_DELETE,
    }

    def __init__(self, repository: Optional[TaskRepository] = None):
        self.repository = repository

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. Typed words are a prefix of a keyword -> suggest keywords
            2. ID command followed by a space -> suggest task IDs
            3. "add task " -> suggest project names
            4. Otherwise -> no suggestions
        """
        text_before_cursor = document.text_before_cursor.lstrip()
        words = text_before_cursor.lower().split()
        trailing_space = text_before_cursor.endswith(" ")

        # Case 1: still typing the keyword
        keyword_matches = [
            cmd for cmd in self.COMMANDS
            if cmd.startswith(text_before_cursor.lower()) and cmd != text_before_cursor.lower().strip()
        ]
        if keyword_matches or not words:
            yield from self._complete_commands(text_before_cursor)
            return

        # Case 2: task ID as first argument
        command = words[0]
        if command in self.ID_FIRST_COMMANDS:
            if len(words) == 1 and trailing_space:
                yield from self._complete_task_ids("")
                return
            if len(words) == 2 and not trailing_space:
                yield from self._complete_task_ids(words[1])
                return

        # Case 3: project name after "add task"
        if words[:2] == ["add", "task"]:
            if len(words) == 2 and trailing_space:
                yield from self._complete_project_names("")
                return
            if len(words) == 3 and not trailing_space:
                yield from self._complete_project_names(text_before_cursor.split()[2])
                return

    def _complete_commands(self, text: str) -> Iterable[Completion]:
        """Complete command keywords, including multi-word ones."""
        text_lower = text.lower()
        for cmd in self.COMMANDS:
            if cmd.startswith(text_lower):
                yield Completion(cmd, start_position=-len(text), display=cmd)

    def _complete_task_ids(self, word: str) -> Iterable[Completion]:
        """Complete task IDs, showing the description as meta."""
        if self.repository is None:
            return

        for task in self.repository.all_tasks():
            id_str = str(task.id)
            if not id_str.lower().startswith(word.lower()):
                continue
            description = task.description
            display_description = description if len(description) <= 40 else description[:37] + "..."
            yield Completion(
                id_str,
                start_position=-len(word),
                display=id_str,
                display_meta=display_description,
            )

    def _complete_project_names(self, word: str) -> Iterable[Completion]:
        """Complete project names for add task."""
        if self.repository is None:
            return

        word_lower = word.lower()
        for project in self.repository.projects():
            if project.name.lower().startswith(word_lower):
                yield Completion(
                    project.name,
                    start_position=-len(word),
                    display=project.name,
                    display_meta=f"{len(project.tasks)} task(s)",
                )


def create_completer(repository: Optional[TaskRepository] = None) -> TaskListCompleter:
    """
    Create and return a TaskListCompleter instance.

    Usage:
        completer = create_completer(repository)
        session = PromptSession(completer=completer)
    """
    return TaskListCompleter(repository)
