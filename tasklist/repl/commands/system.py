"""
FILE: tasklist/repl/commands/system.py
PURPOSE: System command handlers for REPL (help, quit, unknown input)
"""

from ...core.constants import HELP_LINES
from ..console import ConsoleIO
from .base import Command


class HelpCommand(Command):
    """Handle 'help' command - show available commands."""

    def execute(self) -> None:
        for line in HELP_LINES:
            self.console.write_line(line)
        self.console.write_line()


class QuitCommand(Command):
    """Handle 'quit' command. Does nothing itself; the loop stops after it."""

    is_terminal = True

    def execute(self) -> None:
        pass


class ErrorCommand(Command):
    """Echo input that isn't a known (or well-formed) command."""

    def __init__(self, text: str, console: ConsoleIO):
        super().__init__(console)
        self.text = text

    def execute(self) -> None:
        self.console.write_line(f'I don\'t know what the command "{self.text}" is.')
