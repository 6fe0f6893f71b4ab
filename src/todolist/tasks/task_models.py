# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import TaskDecodeError


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - id is assigned once by TaskStore and never renumbered.
    - completed only ever goes False -> True (there is no "uncomplete").
    - on disk the description is stored under the key "task".
    """

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "task": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise TaskDecodeError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is a subclass of int; "id": true is not a valid id.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TaskDecodeError(f"task id must be an integer, got {task_id!r}")

        description = raw.get("task")
        if not isinstance(description, str):
            raise TaskDecodeError(f"task {task_id}: 'task' must be a string")

        completed = raw.get("completed")
        if completed is None:
            completed = False
        if not isinstance(completed, bool):
            raise TaskDecodeError(f"task {task_id}: 'completed' must be true or false")

        return cls(id=task_id, description=description, completed=completed)
