"""
FILE: tasklist/core/ids.py
PURPOSE: Issue task identifiers for the lifetime of a session
EXPORTS:
  - IdAllocator
DEPENDENCIES:
  - tasklist.core.models (TaskId)
NOTES:
  - Owned by the session and injected into the repository
  - First identifier issued is "1"
  - Not safe for concurrent callers (the REPL is single-threaded)
"""

from .models import TaskId


class IdAllocator:
    """Monotonically increasing counter handing out TaskIds."""

    def __init__(self, start: int = 0):
        self._last = start

    @property
    def last(self) -> int:
        return self._last

    def next(self) -> TaskId:
        self._last += 1
        return TaskId(str(self._last))
