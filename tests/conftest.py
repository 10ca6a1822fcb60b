"""Shared pytest configuration and fixtures for tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tasklist.core.ids import IdAllocator
from tasklist.core.repository import TaskRepository
from tasklist.repl.dispatcher import CommandFactory

from tests.fakes import FakeConsole


# Date the reference session treats as "today"
REFERENCE_TODAY = date(2020, 10, 10)


@pytest.fixture()
def repository() -> TaskRepository:
    """Empty store with its own ID allocator."""
    return TaskRepository(IdAllocator())


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def factory(repository, console) -> CommandFactory:
    """Command factory pinned to REFERENCE_TODAY."""
    return CommandFactory(repository, console, today=lambda: REFERENCE_TODAY)
