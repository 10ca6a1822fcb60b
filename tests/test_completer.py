"""Quick test of completer functionality."""

# Path setup handled by conftest.py
from prompt_toolkit.document import Document

from tasklist.core.models import TaskId
from tasklist.repl.completer import create_completer


def complete(completer, text):
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion():
    """Test that keywords are suggested from their first letters."""
    completer = create_completer()

    assert complete(completer, "u") == ["uncheck"]
    assert set(complete(completer, "de")) == {"deadline", "delete"}
    print("✓ Command completion works")


def test_multi_word_keyword_completion():
    """'view b' completes to the full multi-word keyword."""
    completer = create_completer()

    texts = complete(completer, "view b")
    assert texts == ["view by project", "view by deadline"]

    texts = complete(completer, "add ")
    assert texts == ["add project", "add task"]
    print("✓ Multi-word keyword completion works")


def test_empty_input_suggests_all_commands():
    completer = create_completer()
    texts = complete(completer, "")
    assert "view by project" in texts
    assert "quit" in texts


def test_task_id_completion(repository):
    """Commands expecting an ID suggest the IDs in the store."""
    repository.add_project("secrets")
    repository.add_task("secrets", "Eat more donuts.")
    repository.add_task("secrets", "Destroy all humans.")
    repository.rename_id(TaskId("2"), TaskId("world"))
    completer = create_completer(repository)

    assert complete(completer, "check ") == ["1", "world"]
    assert complete(completer, "delete w") == ["world"]
    assert complete(completer, "deadline 1 ") == []
    print("✓ Task ID completion works")


def test_project_name_completion(repository):
    repository.add_project("secrets")
    repository.add_project("training")
    completer = create_completer(repository)

    assert complete(completer, "add task ") == ["secrets", "training"]
    assert complete(completer, "add task tr") == ["training"]
    assert complete(completer, "add task training Some") == []
    print("✓ Project name completion works")


def test_no_repository_means_no_argument_suggestions():
    completer = create_completer()
    assert complete(completer, "check ") == []
    assert complete(completer, "add task ") == []
