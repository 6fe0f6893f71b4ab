# src/todolist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered in-memory task list for one invocation.

    Order is append order (as loaded, then as added). Ids are unique.
    The store knows nothing about files; task_file.py loads and saves it.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def next_id(self) -> int:
        # Last element + 1, not max(ids) + 1.
        if not self._tasks:
            return 1
        return self._tasks[-1].id + 1

    def add_task(self, description: str) -> Task:
        if not description or not description.strip():
            raise ValueError("description is required")

        task = Task(id=self.next_id(), description=description, completed=False)
        self._tasks.append(task)
        logger.debug("Added task id=%s", task.id)
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark the task done. Completing a done task again is not an error."""
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.completed = True
        logger.debug("Completed task id=%s", task_id)
        return task
