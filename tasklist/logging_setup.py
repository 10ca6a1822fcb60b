"""
FILE: tasklist/logging_setup.py
PURPOSE: Configure stdlib logging for the CLI
EXPORTS:
  - setup_logging(level, log_file) -> None
DEPENDENCIES:
  - logging (stdlib)
NOTES:
  - Console handler writes to stderr; stdout carries the command output
  - Optional file handler records everything at DEBUG
  - Call once, early, from the entry point
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Keep tasklist logs; let other libraries through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasklist" or record.name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Console log level (name like "INFO" or a logging constant)
        log_file: Optional path; when given, all records go there at DEBUG
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
