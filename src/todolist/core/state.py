# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """Everything a command handler needs for one invocation."""

    settings: Any
    task_store: TaskStore
    todo_file: Path
