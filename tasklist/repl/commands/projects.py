"""
FILE: tasklist/repl/commands/projects.py
PURPOSE: Project command handlers for REPL
"""

from ...core.repository import TaskRepository
from ..console import ConsoleIO
from .base import Command


class AddProjectCommand(Command):
    """
    Handle 'add project' command - create a new empty project.

    Usage:
        add project secrets
        add project side quests
    """

    def __init__(self, name: str, repository: TaskRepository, console: ConsoleIO):
        super().__init__(console)
        self.name = name
        self.repository = repository

    def execute(self) -> None:
        self.repository.add_project(self.name)
