# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- loads the task store from the well-known file,
- wires it into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..core.state import AppState
from ..tasks.task_file import LoadResult, load_tasks

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """The tasks file exists but could not be loaded; no command should run."""

    def __init__(self, result: LoadResult, path: Path) -> None:
        super().__init__(f"Could not load tasks from {path}: {result.error}")
        self.result = result


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    A missing tasks file gives an empty store. An unreadable or corrupt one
    raises StartupError, so a later save cannot overwrite it with an empty list.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = settings.todo_file
    result = load_tasks(path)
    if not result.ok:
        raise StartupError(result, path)

    logger.debug("Task store ready (%s, %d tasks)", result.status, len(result.store))
    return AppState(settings=settings, task_store=result.store, todo_file=path)
