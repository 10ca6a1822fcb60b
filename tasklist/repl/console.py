"""
FILE: tasklist/repl/console.py
PURPOSE: Terminal boundary used by the REPL (read a line, write a line)
EXPORTS:
  - ConsoleIO (Protocol implemented by every console)
  - TerminalConsole (rich output + prompt_toolkit input)
DEPENDENCIES:
  - rich (terminal output)
  - prompt_toolkit (line editing, history, completion)
NOTES:
  - Output goes through Console.out(): no markup, no highlighting, so
    "[x]" is printed verbatim
  - Uses prompt_toolkit only when stdin and stdout are a TTY; piped
    input is read line by line
  - A prompt written with write() is held back and passed to the
    prompt session so it isn't drawn twice
  - read_line() raises EOFError when input is exhausted
"""

import sys
from typing import Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console


class ConsoleIO(Protocol):
    """Line-oriented console the REPL talks to."""

    def write(self, text: str) -> None:
        ...

    def write_line(self, text: str = "") -> None:
        ...

    def read_line(self) -> str:
        ...


class TerminalConsole:
    """
    Real console backed by rich and prompt_toolkit.

    Args:
        console: Rich console for output (defaults to stdout)
        stdin: Input stream used when not interactive (defaults to sys.stdin)
        completer: Optional prompt_toolkit completer for interactive mode
        interactive: Force prompt_toolkit on/off (defaults to TTY detection)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        completer: Optional[Completer] = None,
        interactive: Optional[bool] = None,
    ):
        self.console = console if console is not None else Console(highlight=False)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._pending_prompt = ""
        self._session = None

        if interactive is None:
            interactive = self._stdin.isatty() and sys.stdout.isatty()

        if interactive:
            self._session = PromptSession(
                history=InMemoryHistory(),
                completer=completer,
                complete_while_typing=False,
            )

    @property
    def interactive(self) -> bool:
        return self._session is not None

    def set_completer(self, completer: Optional[Completer]) -> None:
        if self._session is not None:
            self._session.completer = completer

    def write(self, text: str) -> None:
        if self._session is not None:
            self._pending_prompt += text
            return
        self.console.out(text, end="", highlight=False)
        self.console.file.flush()

    def write_line(self, text: str = "") -> None:
        self._flush_prompt()
        self.console.out(text, highlight=False)

    def read_line(self) -> str:
        if self._session is not None:
            prompt, self._pending_prompt = self._pending_prompt, ""
            return self._session.prompt(prompt)

        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _flush_prompt(self) -> None:
        if self._pending_prompt:
            self.console.out(self._pending_prompt, end="", highlight=False)
            self._pending_prompt = ""
