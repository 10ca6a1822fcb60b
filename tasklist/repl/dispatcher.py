"""
FILE: tasklist/repl/dispatcher.py
PURPOSE: Map parsed input onto the command object that executes it
EXPORTS:
  - CommandFactory
      create(result) -> Command
DEPENDENCIES:
  - tasklist.repl.parser (ParseResult)
  - tasklist.repl.commands (all command classes)
  - tasklist.core.models (TaskId, parse_date)
  - tasklist.core.exceptions (InvalidInputError)
NOTES:
  - Every keyword maps to exactly one builder
  - Malformed arguments (wrong count, bad date, empty ID) and unknown
    keywords both become an ErrorCommand echoing the original line
  - Builders validate; commands only execute
"""

import logging
from datetime import date
from typing import Callable, Dict, List, Optional

from ..core import constants
from ..core.exceptions import InvalidInputError
from ..core.models import TaskId, parse_date
from ..core.repository import TaskRepository
from .commands import (
    AddProjectCommand,
    AddTaskCommand,
    CheckCommand,
    Command,
    DeadlineCommand,
    DeleteCommand,
    ErrorCommand,
    HelpCommand,
    IdCommand,
    QuitCommand,
    TodayCommand,
    UncheckCommand,
    ViewByDeadlineCommand,
    ViewByProjectCommand,
)
from .console import ConsoleIO
from .parser import ParseResult

logger = logging.getLogger(__name__)


def _require_args(result: ParseResult, count: int) -> List[str]:
    """Return the args if there are exactly `count` of them."""
    if len(result.args) != count:
        raise InvalidInputError(
            f"'{result.command}' expects {count} argument(s), got {len(result.args)}"
        )
    return result.args


class CommandFactory:
    """
    Build commands bound to a repository and console.

    Args:
        repository: Task store the commands act on
        console: Where commands write their output
        today: Callable returning the date used by 'today' (defaults to date.today)
    """

    def __init__(
        self,
        repository: TaskRepository,
        console: ConsoleIO,
        today: Optional[Callable[[], date]] = None,
    ):
        self.repository = repository
        self.console = console
        self.today = today if today is not None else date.today

        self._builders: Dict[str, Callable[[ParseResult], Command]] = {
            constants.CMD_VIEW_BY_PROJECT: self._view_by_project,
            constants.CMD_VIEW_BY_DEADLINE: self._view_by_deadline,
            constants.CMD_ADD_PROJECT: self._add_project,
            constants.CMD_ADD_TASK: self._add_task,
            constants.CMD_CHECK: self._check,
            constants.CMD_UNCHECK: self._uncheck,
            constants.CMD_DEADLINE: self._deadline,
            constants.CMD_TODAY: self._today,
            constants.CMD_ID: self._id,
            constants.CMD_DELETE: self._delete,
            constants.CMD_HELP: self._help,
            constants.CMD_QUIT: self._quit,
        }

    def create(self, result: ParseResult) -> Command:
        """
        Build the command for a parsed line.

        Returns:
            The matching command, or an ErrorCommand for unknown or
            malformed input
        """
        builder = self._builders.get(result.command)
        if builder is None:
            logger.debug("Unknown command: %r", result.raw_input)
            return ErrorCommand(result.raw_input, self.console)

        try:
            return builder(result)
        except InvalidInputError as e:
            logger.debug("Malformed command %r: %s", result.raw_input, e)
            return ErrorCommand(result.raw_input, self.console)

    # --- Builders ---

    def _view_by_project(self, result: ParseResult) -> Command:
        _require_args(result, 0)
        return ViewByProjectCommand(self.repository, self.console)

    def _view_by_deadline(self, result: ParseResult) -> Command:
        _require_args(result, 0)
        return ViewByDeadlineCommand(self.repository, self.console)

    def _add_project(self, result: ParseResult) -> Command:
        if not result.tail:
            raise InvalidInputError("Project name required")
        return AddProjectCommand(result.tail, self.repository, self.console)

    def _add_task(self, result: ParseResult) -> Command:
        parts = result.tail.split(None, 1)
        if len(parts) != 2:
            raise InvalidInputError("Project name and task description required")
        project_name, description = parts
        return AddTaskCommand(project_name, description.strip(), self.repository, self.console)

    def _check(self, result: ParseResult) -> Command:
        (task_id,) = _require_args(result, 1)
        return CheckCommand(TaskId.parse(task_id), self.repository, self.console)

    def _uncheck(self, result: ParseResult) -> Command:
        (task_id,) = _require_args(result, 1)
        return UncheckCommand(TaskId.parse(task_id), self.repository, self.console)

    def _deadline(self, result: ParseResult) -> Command:
        task_id, deadline = _require_args(result, 2)
        return DeadlineCommand(
            TaskId.parse(task_id), parse_date(deadline), self.repository, self.console
        )

    def _today(self, result: ParseResult) -> Command:
        _require_args(result, 0)
        return TodayCommand(self.today, self.repository, self.console)

    def _id(self, result: ParseResult) -> Command:
        old_id, new_id = _require_args(result, 2)
        return IdCommand(TaskId.parse(old_id), TaskId.parse(new_id), self.repository, self.console)

    def _delete(self, result: ParseResult) -> Command:
        (task_id,) = _require_args(result, 1)
        return DeleteCommand(TaskId.parse(task_id), self.repository, self.console)

    def _help(self, result: ParseResult) -> Command:
        return HelpCommand(self.console)

    def _quit(self, result: ParseResult) -> Command:
        return QuitCommand(self.console)
