"""
Test the typer entry point: default REPL launch, 'repl --today', 'version'.
"""

import pytest
from typer.testing import CliRunner

from tasklist import __version__
from tasklist.cli import main as cli_main

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep CliRunner's temporary streams out of the root logger."""
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    monkeypatch.delenv("TASKLIST_TODAY", raising=False)


def test_default_launches_repl():
    """Running with no command starts the REPL and 'quit' ends it."""
    result = runner.invoke(cli_main.app, [], input="quit\n")

    assert result.exit_code == 0, result.output
    assert result.output.strip() == ">"
    print("✓ Default command launches REPL")


def test_repl_session_over_stdin():
    script = "\n".join([
        "add project secrets",
        "add task secrets Eat more donuts.",
        "check 1",
        "view by project",
        "frobnicate",
        "quit",
    ]) + "\n"

    result = runner.invoke(cli_main.app, ["repl"], input=script)

    assert result.exit_code == 0, result.output
    assert "secrets\n    [x] 1: Eat more donuts.\n\n" in result.output
    assert 'I don\'t know what the command "frobnicate" is.\n' in result.output


def test_repl_today_option():
    script = "\n".join([
        "add project p",
        "add task p Due now",
        "add task p Due later",
        "deadline 1 10.10.2020",
        "deadline 2 11.10.2020",
        "today",
        "quit",
    ]) + "\n"

    result = runner.invoke(cli_main.app, ["repl", "--today", "10.10.2020"], input=script)

    assert result.exit_code == 0, result.output
    assert "Due now\n\n" in result.output
    assert "Due later" not in result.output


def test_today_from_environment(monkeypatch):
    monkeypatch.setenv("TASKLIST_TODAY", "11.10.2020")
    script = "add project p\nadd task p Later\ndeadline 1 11.10.2020\ntoday\nquit\n"

    result = runner.invoke(cli_main.app, ["repl"], input=script)

    assert result.exit_code == 0, result.output
    assert "Later\n\n" in result.output


def test_repl_rejects_bad_today():
    result = runner.invoke(cli_main.app, ["repl", "--today", "someday"], input="quit\n")
    assert result.exit_code == 1


def test_end_of_input_exits_cleanly():
    result = runner.invoke(cli_main.app, ["repl"], input="add project p\n")
    assert result.exit_code == 0, result.output


def test_version():
    result = runner.invoke(cli_main.app, ["version"])
    assert result.exit_code == 0
    assert f"tasklist v{__version__}" in result.output
