"""
FILE: tasklist/cli/main.py
PURPOSE: Typer-based process entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - repl() - Launch interactive REPL
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted error output)
  - tasklist.config (environment settings)
  - tasklist.logging_setup (logging configuration)
  - tasklist.repl (interactive mode)
NOTES:
  - Running 'tasklist' with no command launches the REPL
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..config import get_settings
from ..core.exceptions import InvalidInputError
from ..core.models import parse_date
from ..logging_setup import setup_logging

# Typer app setup
app = typer.Typer(
    name="tasklist",
    help="Interactive command-line task list",
    add_completion=False,
)

console = Console()
error_console = Console(stderr=True)


def _resolve_today(value: Optional[str]):
    """CLI --today beats TASKLIST_TODAY; None means the system date."""
    if value:
        return parse_date(value)
    return get_settings().today


def _start_repl(today_option: Optional[str]) -> None:
    from ..repl.main import run_repl

    try:
        today = _resolve_today(today_option)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        run_repl(today=today)
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level for stderr (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """
    Default callback - configures logging, launches REPL when no command is specified.
    """
    try:
        settings = get_settings()
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    setup_logging(level=log_level or settings.log_level, log_file=settings.log_file)

    if ctx.invoked_subcommand is None:
        _start_repl(None)


@app.command()
def version():
    """Show tasklist version."""
    console.print(f"tasklist v{__version__}")


@app.command()
def repl(
    today: Optional[str] = typer.Option(
        None, "--today", help="Date used by the 'today' command (dd.mm.yyyy)"
    ),
):
    """Launch the interactive REPL."""
    _start_repl(today)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
