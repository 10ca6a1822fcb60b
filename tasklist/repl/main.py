"""
FILE: tasklist/repl/main.py
PURPOSE: Interactive REPL session for the task list
EXPORTS:
  - TaskListSession (owns the store, ID allocator, and run loop)
  - run_repl(today) - Run a session on the real terminal
  - main() - Entry point for REPL mode
DEPENDENCIES:
  - rich (output via TerminalConsole)
  - prompt_toolkit (input via TerminalConsole)
  - tasklist.core.repository (task store)
  - tasklist.repl.parser (command parsing)
  - tasklist.repl.dispatcher (command construction)
NOTES:
  - Writes "> " before every read
  - Stops after the quit command (checked via is_terminal) or at end of input
  - Blank lines are ignored
  - Unexpected errors are logged and reported, the loop keeps going
"""

import logging
from datetime import date
from typing import Callable, Optional

from ..core.constants import PROMPT
from ..core.ids import IdAllocator
from ..core.repository import TaskRepository
from .completer import create_completer
from .console import ConsoleIO, TerminalConsole
from .dispatcher import CommandFactory
from .parser import parse_command

logger = logging.getLogger(__name__)


class TaskListSession:
    """
    One interactive session: empty store at start, discarded at exit.

    Args:
        console: Console to read commands from and write output to
        today: Callable returning the date used by 'today'
        repository: Store to use (a fresh one is created if omitted)
    """

    def __init__(
        self,
        console: ConsoleIO,
        today: Optional[Callable[[], date]] = None,
        repository: Optional[TaskRepository] = None,
    ):
        self.console = console
        self.allocator = IdAllocator()
        self.repository = repository if repository is not None else TaskRepository(self.allocator)
        self.factory = CommandFactory(self.repository, console, today=today)
        self.running = True

    def execute(self, line: str) -> None:
        """
        Parse and execute a single input line.

        Sets running to False when the executed command is terminal.
        """
        result = parse_command(line)
        if not result.command:
            return

        command = self.factory.create(result)
        logger.debug("Executing %s for %r", type(command).__name__, result.raw_input)
        try:
            command.execute()
        except Exception as e:
            # Commands report domain errors themselves; anything else is a bug
            logger.exception("Command %r failed", result.raw_input)
            self.console.write_line(f"Unexpected error: {e}")

        if command.is_terminal:
            self.running = False

    def run(self) -> None:
        """
        Main REPL loop.

        Exits on:
        - "quit" command
        - end of input (EOFError)
        """
        while self.running:
            self.console.write(PROMPT)
            try:
                line = self.console.read_line()
            except KeyboardInterrupt:
                self.console.write_line("(Type 'quit' to exit)")
                continue
            except EOFError:
                logger.debug("End of input, leaving session")
                self.console.write_line()
                break

            self.execute(line)


def run_repl(today: Optional[date] = None) -> None:
    """
    Run a session on the real terminal.

    Args:
        today: Pin the date used by 'today' (defaults to the system date)
    """
    today_provider = (lambda: today) if today is not None else None

    console = TerminalConsole()
    session = TaskListSession(console, today=today_provider)
    if console.interactive:
        # The session owns the store, so the completer is attached afterwards
        console.set_completer(create_completer(session.repository))
    session.run()


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: tasklist repl
    """
    run_repl()


if __name__ == "__main__":
    main()
