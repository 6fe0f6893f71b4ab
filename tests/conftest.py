# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.state import AppState
from todolist.tasks.task_models import Task
from todolist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level=logging.WARNING,
        log_dir=None,
        todo_file=tmp_path / ".todos.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with an empty store writing to tmp_path."""
    return AppState(settings=settings, task_store=TaskStore(), todo_file=settings.todo_file)


@pytest.fixture()
def two_tasks_state(settings: SimpleNamespace) -> AppState:
    store = TaskStore(
        [
            Task(id=1, description="buy milk"),
            Task(id=2, description="walk dog"),
        ]
    )
    return AppState(settings=settings, task_store=store, todo_file=settings.todo_file)
