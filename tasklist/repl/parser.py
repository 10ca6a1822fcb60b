"""
FILE: tasklist/repl/parser.py
PURPOSE: Parse user input into a command keyword and its arguments
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - dataclasses (for ParseResult)
  - typing (type hints)
  - tasklist.core.constants (keywords and aliases)
NOTES:
  - Multi-word keywords: "view by project", "add task", ...
  - Case-insensitive command names
  - Keeps the raw tail for free-text fields (descriptions keep their spacing)
  - Never rejects input; unknown keywords are the dispatcher's concern
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.constants import COMMAND_ALIASES, MULTI_WORD_COMMANDS


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command keyword (e.g., "add task", "check", "today")
        args: Whitespace-separated tokens after the keyword
        tail: Text after the keyword with inner spacing preserved
        raw_input: Original input string (stripped)
    """
    command: str
    args: List[str] = field(default_factory=list)
    tail: str = ""
    raw_input: str = ""


def _match_keyword(input_str: str) -> Tuple[str, str]:
    """Split input into (keyword, rest) honouring multi-word keywords."""
    words = input_str.split()
    lowered = [w.lower() for w in words]

    for keyword in MULTI_WORD_COMMANDS:
        size = len(keyword.split())
        if " ".join(lowered[:size]) == keyword:
            return keyword, _skip_words(input_str, size)

    command = COMMAND_ALIASES.get(lowered[0], lowered[0])
    return command, _skip_words(input_str, 1)


def _skip_words(text: str, count: int) -> str:
    """Drop the first `count` whitespace-delimited words, keep the rest verbatim."""
    rest = text
    for _ in range(count):
        parts = rest.lstrip().split(None, 1)
        rest = parts[1] if len(parts) == 2 else ""
    return rest.strip()


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and tail.

    Examples:
        >>> parse_command("add task secrets Eat more donuts.")
        ParseResult(command="add task", args=["secrets", "Eat", "more", "donuts."],
                    tail="secrets Eat more donuts.", ...)

        >>> parse_command("check 1")
        ParseResult(command="check", args=["1"], tail="1", ...)

        >>> parse_command("View By Project")
        ParseResult(command="view by project", args=[], tail="", ...)

    Args:
        input_str: Raw user input from REPL prompt

    Returns:
        ParseResult with command, args, and tail extracted

    Notes:
        - Empty input returns command="" with no args
        - "show" and "exit" are accepted as aliases
    """
    input_str = (input_str or "").strip()
    if not input_str:
        return ParseResult(command="", args=[], tail="", raw_input=input_str)

    command, tail = _match_keyword(input_str)

    return ParseResult(
        command=command,
        args=tail.split(),
        tail=tail,
        raw_input=input_str,
    )
