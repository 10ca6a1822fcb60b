"""
Tests for the domain models and the ID allocator.
"""

from datetime import date

import pytest

from tasklist.core.exceptions import InvalidInputError
from tasklist.core.ids import IdAllocator
from tasklist.core.models import Project, Task, TaskId, format_date, parse_date


def test_task_id_parse_and_format():
    """TaskId keeps the text it was given, minus surrounding whitespace."""
    assert TaskId.parse(" 42 ") == TaskId("42")
    assert str(TaskId.parse("foo")) == "foo"
    assert TaskId("1") != TaskId("01")
    print("✓ TaskId parses and formats")


def test_task_id_rejects_empty():
    for text in ("", "   "):
        with pytest.raises(InvalidInputError):
            TaskId.parse(text)
    print("✓ Empty TaskId rejected")


def test_parse_date():
    assert parse_date("10.10.2020") == date(2020, 10, 10)
    assert parse_date("1.2.2021") == date(2021, 2, 1)
    print("✓ dd.mm.yyyy dates parse")


def test_parse_date_invalid():
    """Malformed or impossible dates raise InvalidInputError."""
    for text in ("2020-10-10", "32.01.2020", "10.13.2020", "tomorrow", ""):
        try:
            parse_date(text)
            assert False, f"Should have rejected {text!r}"
        except InvalidInputError as e:
            print(f"✓ Rejected {text!r}: {e}")


def test_format_date_zero_pads():
    assert format_date(date(2020, 1, 5)) == "05.01.2020"
    assert format_date(date(2020, 10, 11)) == "11.10.2020"


def test_new_task_defaults():
    task = Task(id=TaskId("1"), description="Eat more donuts.")
    assert task.done is False
    assert task.deadline is None


def test_projects_do_not_share_task_lists():
    a = Project("a")
    b = Project("b")
    a.tasks.append(Task(id=TaskId("1"), description="x"))
    assert b.tasks == []


def test_allocator_starts_at_one_and_increases():
    """IDs are issued as 1, 2, 3, ... with no repeats."""
    allocator = IdAllocator()
    issued = [allocator.next() for _ in range(50)]

    assert issued[0] == TaskId("1")
    numbers = [int(str(task_id)) for task_id in issued]
    assert numbers == sorted(numbers)
    assert len(set(issued)) == len(issued)
    assert allocator.last == 50
    print("✓ Allocator issues strictly increasing unique IDs")


def test_allocators_are_independent():
    first = IdAllocator()
    second = IdAllocator()
    first.next()
    first.next()
    assert second.next() == TaskId("1")
