# src/todolist/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import PersistenceError, TaskNotFoundError
from ..tasks.task_file import save_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

# Base-10 integer with an optional sign; no spaces, no underscores.
_TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

DONE_MARK = "✔"


class CommandRegistry:
    """Maps the first command-line word to a handler (list, add, complete)."""

    def __init__(self, default: str = "list") -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._default = default

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run exactly one command for `argv` (program name excluded).
        Returns the text to print. Empty argv runs the default command.
        """
        if not argv:
            argv = [self._default]

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return f"Unknown command: {name}\n{self.build_usage()}"

        return handler(state, args)

    def build_usage(self) -> str:
        return f"Usage: todo [{'|'.join(self._handlers)}]"


registry = CommandRegistry()


def _save(state: AppState) -> str | None:
    """Persist the store; returns an error message on failure."""
    try:
        save_tasks(state.todo_file, state.task_store)
    except PersistenceError as e:
        # The in-memory change is kept; the process is about to exit anyway.
        return f"Error saving task: {e}"
    return None


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks to show. Add one with 'todo add \"my task\"'"

    lines = []
    for task in tasks:
        status = DONE_MARK if task.completed else " "
        lines.append(f"[{status}] {task.id}: {task.description}")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    if not text.strip():
        return 'Error: Missing task description. Usage: todo add "your task here"'

    state.task_store.add_task(text)

    err = _save(state)
    if err:
        return err
    return f'Added task: "{text}"'


def cmd_complete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Error: Missing task number. Usage: todo complete <task_number>"

    raw = args[0]
    if not _TASK_NUMBER_RE.fullmatch(raw):
        return "Error: Invalid task number. Must be an integer."
    try:
        task_id = int(raw)
    except ValueError:
        # Longer than the interpreter's integer-string limit.
        return "Error: Invalid task number. Must be an integer."

    try:
        state.task_store.complete_task(task_id)
    except TaskNotFoundError as e:
        return f"Error: {e}"

    err = _save(state)
    if err:
        return err
    return f"Completed task {task_id}."


registry.register("list", cmd_list)
registry.register("add", cmd_add)
registry.register("complete", cmd_complete)
