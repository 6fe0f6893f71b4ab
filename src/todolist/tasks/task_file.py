# src/todolist/tasks/task_file.py

"""
JSON persistence for TaskStore.

File format: a JSON array of {"id": int, "task": str, "completed": bool},
in store order, pretty-printed with two-space indentation. Compact JSON
loads the same way.

Loading never silently defaults: callers get a LoadResult and decide what
a missing or broken file means for them.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from .errors import PersistenceError, TaskDecodeError, TaskError
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

TODO_FILE_NAME = ".todos.json"


class LoadStatus(StrEnum):
    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    store: TaskStore = field(default_factory=TaskStore)
    error: TaskError | None = None

    @property
    def ok(self) -> bool:
        return self.status is not LoadStatus.FAILED


def decode_tasks(text: str) -> list[Task]:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, over-long integer literals, deeply nested arrays.
        raise TaskDecodeError(f"invalid JSON: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a list of tasks, got {type(data).__name__}")

    tasks = [Task.from_dict(item) for item in data]

    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise TaskDecodeError(f"duplicate task id {task.id}")
        seen.add(task.id)
    return tasks


def encode_tasks(store: TaskStore) -> str:
    return json.dumps([t.to_dict() for t in store], ensure_ascii=False, indent=2)


def load_tasks(path: str | Path) -> LoadResult:
    path = Path(path)
    if not path.exists():
        logger.debug("No tasks file at %s, starting empty.", path)
        return LoadResult(LoadStatus.MISSING)

    try:
        text = path.read_text("utf-8")
    except OSError as e:
        logger.warning("Failed to read tasks file %s: %s", path, e)
        return LoadResult(LoadStatus.FAILED, error=PersistenceError(f"cannot read file: {e}"))
    except UnicodeDecodeError as e:
        logger.warning("Tasks file %s is not UTF-8: %s", path, e)
        return LoadResult(LoadStatus.FAILED, error=TaskDecodeError(f"not UTF-8 text: {e}"))

    try:
        tasks = decode_tasks(text)
    except TaskDecodeError as e:
        logger.warning("Failed to decode tasks file %s: %s", path, e)
        return LoadResult(LoadStatus.FAILED, error=e)

    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return LoadResult(LoadStatus.LOADED, store=TaskStore(tasks))


def save_tasks(path: str | Path, store: TaskStore) -> None:
    """
    Replace the tasks file with the full contents of `store`.

    Raises PersistenceError if the file cannot be written. Not retried.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(encode_tasks(store), "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        logger.warning("Failed to save tasks to %s: %s", path, e)
        raise PersistenceError(str(e)) from e
    logger.info("Saved %d tasks to %s", len(store), path)
