"""
FILE: tasklist/core/repository.py
PURPOSE: In-memory store of projects and their tasks
EXPORTS:
  - TaskRepository
      add_project(name) -> Project
      find_project(name) -> Project | None
      projects() -> List[Project]
      add_task(project_name, description) -> Task
      find_task_by_id(task_id) -> Task | None
      set_done(task_id, done) -> Task
      set_deadline(task_id, deadline) -> Task
      rename_id(old_id, new_id) -> Task
      delete_task_by_id(task_id) -> None
      all_tasks() -> List[Task]
      tasks_due_on(day) -> List[Task]
      grouped_by_project() -> Dict[str, List[Task]]
      grouped_by_deadline() -> Dict[str, List[Task]]
DEPENDENCIES:
  - logging (stdlib)
  - datetime (stdlib)
  - tasklist.core.models (Task, Project, TaskId, format_date)
  - tasklist.core.ids (IdAllocator)
  - tasklist.core.exceptions (TaskNotFoundError, ProjectNotFoundError)
NOTES:
  - State lives only for the process lifetime; nothing is written to disk
  - Returns domain objects, never dicts of raw fields
  - Task lookups scan projects in insertion order, then tasks in insertion order
  - Task IDs are unique across the whole store, not per project
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from .exceptions import ProjectNotFoundError, TaskNotFoundError
from .ids import IdAllocator
from .models import Project, Task, TaskId, format_date

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Owns the ordered list of projects.

    Args:
        allocator: Source of fresh task IDs (a new one is created if omitted)
    """

    def __init__(self, allocator: Optional[IdAllocator] = None):
        self._projects: List[Project] = []
        self._allocator = allocator if allocator is not None else IdAllocator()

    # --- Project Operations ---

    def add_project(self, name: str) -> Project:
        """
        Append a new empty project.

        Note:
            Duplicate names are allowed; lookups return the first match.
        """
        project = Project(name=name)
        self._projects.append(project)
        logger.debug("Added project %r", name)
        return project

    def find_project(self, name: str) -> Optional[Project]:
        """Return the first project with this name, or None."""
        for project in self._projects:
            if project.name == name:
                return project
        return None

    def projects(self) -> List[Project]:
        return list(self._projects)

    # --- Task Operations ---

    def add_task(self, project_name: str, description: str) -> Task:
        """
        Create a task in the named project.

        Args:
            project_name: Name of an existing project
            description: Free text, may contain spaces

        Returns:
            Newly created Task (not done, no deadline)

        Raises:
            ProjectNotFoundError: If no project has that name

        Note:
            Allocated IDs already taken by a renamed task are skipped,
            so IDs stay unique across the store.
        """
        project = self.find_project(project_name)
        if project is None:
            raise ProjectNotFoundError(project_name)

        task_id = self._allocator.next()
        while self.find_task_by_id(task_id) is not None:
            logger.debug("Skipping allocated ID %s, already in use", task_id)
            task_id = self._allocator.next()

        task = Task(id=task_id, description=description)
        project.tasks.append(task)
        logger.debug("Added task %s to project %r", task_id, project_name)
        return task

    def find_task_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Return the first task with this ID, or None."""
        for task in self.all_tasks():
            if task.id == task_id:
                return task
        return None

    def _get_task_or_raise(self, task_id: TaskId) -> Task:
        task = self.find_task_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def set_done(self, task_id: TaskId, done: bool) -> Task:
        """
        Set a task's done flag.

        Raises:
            TaskNotFoundError: If no task has that ID
        """
        task = self._get_task_or_raise(task_id)
        task.done = done
        logger.debug("Task %s done=%s", task_id, done)
        return task

    def set_deadline(self, task_id: TaskId, deadline: date) -> Task:
        """
        Set a task's deadline.

        Raises:
            TaskNotFoundError: If no task has that ID
        """
        task = self._get_task_or_raise(task_id)
        task.deadline = deadline
        logger.debug("Task %s deadline=%s", task_id, deadline)
        return task

    def rename_id(self, old_id: TaskId, new_id: TaskId) -> Task:
        """
        Give a task a new ID.

        Raises:
            TaskNotFoundError: If no task has old_id

        Note:
            No collision check is done here; callers must make sure
            new_id is free.
        """
        task = self._get_task_or_raise(old_id)
        task.id = new_id
        logger.debug("Task %s renamed to %s", old_id, new_id)
        return task

    def delete_task_by_id(self, task_id: TaskId) -> None:
        """Remove the first task with this ID. Does nothing if absent."""
        for project in self._projects:
            for index, task in enumerate(project.tasks):
                if task.id == task_id:
                    del project.tasks[index]
                    logger.debug("Deleted task %s from project %r", task_id, project.name)
                    return

    # --- Views ---

    def all_tasks(self) -> List[Task]:
        return [task for project in self._projects for task in project.tasks]

    def tasks_due_on(self, day: date) -> List[Task]:
        return [task for task in self.all_tasks() if task.deadline == day]

    def grouped_by_project(self) -> Dict[str, List[Task]]:
        """
        Map project name to its tasks, in insertion order.

        Note:
            Projects without tasks are included with an empty list.
            With duplicate project names the later project's tasks are
            appended to the same group.
        """
        groups: Dict[str, List[Task]] = {}
        for project in self._projects:
            groups.setdefault(project.name, []).extend(project.tasks)
        return groups

    def grouped_by_deadline(self) -> Dict[str, List[Task]]:
        """
        Map formatted deadline (dd.mm.yyyy) to tasks due that day.

        Groups appear in the order their deadline is first seen while
        scanning all_tasks(); tasks without a deadline are left out.
        """
        groups: Dict[str, List[Task]] = {}
        for task in self.all_tasks():
            if task.deadline is None:
                continue
            groups.setdefault(format_date(task.deadline), []).append(task)
        return groups
