"""
FILE: tasklist/repl/commands/base.py
PURPOSE: Common base class for REPL commands
EXPORTS:
  - Command
DEPENDENCIES:
  - tasklist.repl.console (ConsoleIO)
NOTES:
  - Each command is built once by the dispatcher and executed once
  - execute() reports domain errors on the console; it never raises them
  - is_terminal marks the command that ends the session
"""

from ..console import ConsoleIO


class Command:
    """One parsed unit of user intent."""

    is_terminal = False

    def __init__(self, console: ConsoleIO):
        self.console = console

    def execute(self) -> None:
        raise NotImplementedError
