# tests/test_task_file.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todolist.tasks.errors import PersistenceError, TaskDecodeError
from todolist.tasks.task_file import LoadStatus, load_tasks, save_tasks
from todolist.tasks.task_models import Task
from todolist.tasks.task_store import TaskStore


def test_missing_file_is_empty_store(tmp_path: Path) -> None:
    result = load_tasks(tmp_path / ".todos.json")
    assert result.status is LoadStatus.MISSING
    assert result.ok
    assert result.error is None
    assert len(result.store) == 0


def test_save_then_load_keeps_order_and_fields(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    store = TaskStore(
        [
            Task(id=3, description="walk dog", completed=True),
            Task(id=1, description="café ☕", completed=False),
            Task(id=2, description="buy milk", completed=True),
        ]
    )
    save_tasks(path, store)

    result = load_tasks(path)
    assert result.status is LoadStatus.LOADED
    assert result.store.list_tasks() == store.list_tasks()


def test_saved_document_layout(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    save_tasks(path, TaskStore([Task(id=1, description="buy milk")]))

    text = path.read_text("utf-8")
    assert json.loads(text) == [{"id": 1, "task": "buy milk", "completed": False}]
    assert '\n  {\n    "id": 1,' in text
    assert not (tmp_path / ".todos.json.tmp").exists()


def test_save_replaces_previous_contents(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    save_tasks(path, TaskStore([Task(id=1, description="a"), Task(id=2, description="b")]))
    save_tasks(path, TaskStore([Task(id=5, description="c")]))
    assert json.loads(path.read_text("utf-8")) == [{"id": 5, "task": "c", "completed": False}]


def test_compact_json_loads(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    path.write_text('[{"id":1,"task":"x","completed":true},{"id":2,"task":"y"}]', "utf-8")

    result = load_tasks(path)
    assert result.status is LoadStatus.LOADED
    assert result.store.list_tasks() == [
        Task(id=1, description="x", completed=True),
        Task(id=2, description="y", completed=False),
    ]


def test_null_document_is_empty(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    path.write_text("null", "utf-8")
    result = load_tasks(path)
    assert result.status is LoadStatus.LOADED
    assert len(result.store) == 0


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        '{"id": 1}',
        '[{"id": "1", "task": "x", "completed": false}]',
        '[{"id": true, "task": "x", "completed": false}]',
        '[{"id": 1, "task": 5, "completed": false}]',
        '[{"id": 1, "task": "x", "completed": "yes"}]',
        '[{"id": 1, "task": "a"}, {"id": 1, "task": "b"}]',
        "[1, 2]",
        '[{"id": ' + "1" * 5000 + ', "task": "x"}]',
        "[" * 200000,
    ],
)
def test_invalid_documents_fail_to_load(tmp_path: Path, text: str) -> None:
    path = tmp_path / ".todos.json"
    path.write_text(text, "utf-8")

    result = load_tasks(path)
    assert result.status is LoadStatus.FAILED
    assert not result.ok
    assert isinstance(result.error, TaskDecodeError)


def test_save_failure_raises_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "missing-dir" / ".todos.json"
    with pytest.raises(PersistenceError):
        save_tasks(path, TaskStore([Task(id=1, description="a")]))
    assert not path.exists()


def test_null_completed_reads_as_not_done(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    path.write_text('[{"id": 1, "task": "x", "completed": null}]', "utf-8")

    result = load_tasks(path)
    assert result.status is LoadStatus.LOADED
    assert result.store.list_tasks() == [Task(id=1, description="x", completed=False)]


def test_unreadable_file_fails_with_persistence_error(tmp_path: Path) -> None:
    # A directory in place of the file: exists, but cannot be read as text.
    path = tmp_path / ".todos.json"
    path.mkdir()

    result = load_tasks(path)
    assert result.status is LoadStatus.FAILED
    assert isinstance(result.error, PersistenceError)
    assert len(result.store) == 0


def test_non_utf8_file_fails_to_decode(tmp_path: Path) -> None:
    path = tmp_path / ".todos.json"
    path.write_bytes(b'[{"id": 1, "task": "\xff\xfe"}]')

    result = load_tasks(path)
    assert result.status is LoadStatus.FAILED
    assert isinstance(result.error, TaskDecodeError)
