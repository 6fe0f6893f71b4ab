# src/todolist/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for task subsystem errors."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class PersistenceError(TaskError, OSError):
    """Reading or writing the tasks file failed (permissions, disk full, ...)."""


class TaskDecodeError(TaskError, ValueError):
    """The tasks file exists but does not hold a valid task list."""
