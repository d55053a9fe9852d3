# tests/test_task_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from taskpad.tasks.task_models import Priority
from taskpad.tasks.task_store import TaskStore
from taskpad.tasks.validation import ValidationError


def test_add_list_toggle_delete(store: TaskStore) -> None:
    first = store.add_task(text="  Buy milk  ", priority=Priority.HIGH)
    second = store.add_task(text="Walk the dog")

    assert first.text == "Buy milk"
    assert first.priority is Priority.HIGH
    assert first.completed is False
    assert store.count_tasks() == 2

    # newest first
    assert [t.id for t in store.list_tasks()] == [second.id, first.id]

    toggled = store.toggle_task(first.id)
    assert toggled is not None and toggled.completed is True
    toggled_back = store.toggle_task(first.id)
    assert toggled_back is not None and toggled_back.completed is False

    assert store.delete_task(first.id) is True
    assert store.delete_task(first.id) is False
    assert store.get_task(first.id) is None
    assert store.toggle_task(first.id) is None
    assert store.count_tasks() == 1


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "Please enter a task."),
        ("     ", "Please enter a task."),
        ("ab", "Task must be at least 3 characters long."),
        ("x" * 201, "Task cannot exceed 200 characters."),
        ("BUY MILK", "This task already exists."),
    ],
)
def test_add_task_validation(store: TaskStore, text: str, message: str) -> None:
    store.add_task(text="Buy milk")

    with pytest.raises(ValidationError) as exc:
        store.add_task(text=text)

    assert str(exc.value) == message
    assert store.count_tasks() == 1


def test_length_boundaries_are_accepted(store: TaskStore) -> None:
    store.add_task(text="abc")
    store.add_task(text="y" * 200)
    assert store.count_tasks() == 2


def test_categories_are_unique_and_case_sensitive(store: TaskStore) -> None:
    assert store.add_category(" Work ") == "Work"
    assert store.add_category("work") == "work"

    with pytest.raises(ValidationError, match="Category already exists: Work"):
        store.add_category("Work")
    with pytest.raises(ValidationError):
        store.add_category("   ")

    assert store.list_categories() == ["Work", "work"]


def test_deleting_category_uncategorizes_tasks(store: TaskStore) -> None:
    store.add_category("Work")
    store.add_category("Home")
    a = store.add_task(text="Finish report", category="Work")
    b = store.add_task(text="Prepare slides")
    assert store.set_task_category(b.id, "Work") is True
    c = store.add_task(text="Clean kitchen", category="Home")

    cleared = store.delete_category("Work")

    assert cleared == 2
    assert store.list_categories() == ["Home"]
    assert store.count_tasks() == 3
    assert store.get_task(a.id).category is None
    assert store.get_task(b.id).category is None
    assert store.get_task(c.id).category == "Home"

    with pytest.raises(ValidationError, match="Unknown category"):
        store.delete_category("Work")


def test_task_category_must_exist(store: TaskStore) -> None:
    task = store.add_task(text="Finish report")

    with pytest.raises(ValidationError, match="Unknown category: Work"):
        store.set_task_category(task.id, "Work")
    with pytest.raises(ValidationError):
        store.add_task(text="Another task", category="Work")

    store.add_category("Work")
    assert store.set_task_category(task.id, "Work") is True
    assert store.set_task_category(task.id, None) is True
    assert store.get_task(task.id).category is None
    assert store.set_task_category(9999, "Work") is False


def test_preferences_round_trip(store: TaskStore) -> None:
    assert store.get_preference("theme") is None
    assert store.get_preference("theme", "default") == "default"

    store.set_preference("theme", "dark")
    store.set_preference("theme", "ocean")

    assert store.get_preference("theme") == "ocean"


def test_data_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "tasks.sqlite3"
    first = TaskStore(db)
    first.add_category("Work")
    first.add_task(text="Finish report", category="Work")

    second = TaskStore(db)

    assert second.list_categories() == ["Work"]
    assert [t.category for t in second.list_tasks()] == ["Work"]


def test_migrates_database_without_category_column(tmp_path: Path) -> None:
    db = tmp_path / "old.sqlite3"
    conn = sqlite3.connect(str(db))
    conn.execute(
        "CREATE TABLE tasks (id INTEGER PRIMARY KEY AUTOINCREMENT, text TEXT NOT NULL, "
        "completed INTEGER NOT NULL DEFAULT 0, created_at REAL NOT NULL)"
    )
    conn.execute("INSERT INTO tasks(text, completed, created_at) VALUES ('Old task', 1, 1.0)")
    conn.commit()
    conn.close()

    store = TaskStore(db)
    tasks = store.list_tasks()

    assert len(tasks) == 1
    assert tasks[0].text == "Old task"
    assert tasks[0].completed is True
    assert tasks[0].category is None
    assert tasks[0].priority is Priority.MEDIUM

    store.add_category("Archive")
    assert store.set_task_category(tasks[0].id, "Archive") is True
