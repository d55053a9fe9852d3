# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from .task_models import Priority, Task
from .validation import ValidationError, validate_category_name, validate_task_text

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite store for tasks, categories and UI preferences.

    The schema is migration-safe:
    - create tables if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Categories are plain names. Tasks keep the name (no foreign key); deleting
    a category clears it on referencing tasks instead of deleting them.

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    text TEXT NOT NULL,
                    priority TEXT NOT NULL DEFAULT 'medium',
                    category TEXT,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS categories (
                    name TEXT PRIMARY KEY,
                    created_at REAL NOT NULL
                )
                """
            )
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

            # Databases created before categories existed lack the column.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("priority", "TEXT NOT NULL DEFAULT 'medium'")
            add_col("category", "TEXT")
            add_col("completed", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_category ON tasks(category)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            text=str(row["text"] or ""),
            priority=Priority.from_db(row["priority"]),
            category=row["category"] or None,
            completed=bool(row["completed"]),
            created_at=float(row["created_at"] or 0.0),
        )

    @staticmethod
    def _category_exists(conn: sqlite3.Connection, name: str) -> bool:
        row = conn.execute("SELECT 1 FROM categories WHERE name = ?", (name,)).fetchone()
        return row is not None

    # ---- tasks ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def add_task(
        self,
        *,
        text: str,
        priority: Priority = Priority.MEDIUM,
        category: str | None = None,
    ) -> Task:
        """Validate and insert a task. Raises ValidationError on bad input."""
        conn = self._get_conn()
        try:
            existing = [r["text"] for r in conn.execute("SELECT text FROM tasks")]
            clean = validate_task_text(text, existing)

            if category is not None and not self._category_exists(conn, category):
                raise ValidationError(f"Unknown category: {category}")

            now = time.time()
            cur = conn.execute(
                "INSERT INTO tasks(text, priority, category, completed, created_at) "
                "VALUES (?, ?, ?, 0, ?)",
                (clean, Priority(priority).value, category, now),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for tasks insert")
            logger.debug("Task added id=%s priority=%s category=%s", rowid, priority, category)
            return Task(
                id=int(rowid),
                text=clean,
                priority=Priority(priority),
                category=category,
                completed=False,
                created_at=now,
            )
        finally:
            conn.close()

    def get_task(self, task_id: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def list_tasks(self) -> list[Task]:
        """All tasks, newest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY created_at DESC, id DESC").fetchall()
            return [self._row_to_task(r) for r in rows]
        finally:
            conn.close()

    def toggle_task(self, task_id: int) -> Task | None:
        """Flip the completed flag. Returns the updated task, or None if missing."""
        conn = self._get_conn()
        try:
            cur = conn.execute(
                "UPDATE tasks SET completed = 1 - completed WHERE id = ?", (int(task_id),)
            )
            conn.commit()
            if cur.rowcount != 1:
                return None
        finally:
            conn.close()
        return self.get_task(task_id)

    def delete_task(self, task_id: int) -> bool:
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            conn.commit()
            deleted = cur.rowcount == 1
        finally:
            conn.close()
        if deleted:
            logger.debug("Task deleted id=%s", task_id)
        return deleted

    def set_task_category(self, task_id: int, category: str | None) -> bool:
        """
        Assign (or clear, with None) a task's category.

        Returns False if the task does not exist. Raises ValidationError if the
        category is not a known category name.
        """
        conn = self._get_conn()
        try:
            if category is not None and not self._category_exists(conn, category):
                raise ValidationError(f"Unknown category: {category}")
            cur = conn.execute(
                "UPDATE tasks SET category = ? WHERE id = ?", (category, int(task_id))
            )
            conn.commit()
            return cur.rowcount == 1
        finally:
            conn.close()

    # ---- categories ----

    def list_categories(self) -> list[str]:
        """Category names in creation order."""
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT name FROM categories ORDER BY rowid ASC").fetchall()
            return [str(r["name"]) for r in rows]
        finally:
            conn.close()

    def add_category(self, name: str) -> str:
        conn = self._get_conn()
        try:
            existing = [r["name"] for r in conn.execute("SELECT name FROM categories")]
            clean = validate_category_name(name, existing)
            conn.execute(
                "INSERT INTO categories(name, created_at) VALUES (?, ?)", (clean, time.time())
            )
            conn.commit()
            logger.debug("Category added name=%s", clean)
            return clean
        finally:
            conn.close()

    def delete_category(self, name: str) -> int:
        """
        Remove a category and clear it on referencing tasks.

        Returns the number of tasks that became uncategorized.
        """
        conn = self._get_conn()
        try:
            if not self._category_exists(conn, name):
                raise ValidationError(f"Unknown category: {name}")
            cur = conn.execute("UPDATE tasks SET category = NULL WHERE category = ?", (name,))
            cleared = cur.rowcount
            conn.execute("DELETE FROM categories WHERE name = ?", (name,))
            conn.commit()
            logger.debug("Category deleted name=%s cleared_tasks=%s", name, cleared)
            return int(cleared)
        finally:
            conn.close()

    # ---- preferences ----

    def get_preference(self, key: str, default: str | None = None) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
            return str(row["value"]) if row else default
        finally:
            conn.close()

    def set_preference(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO preferences(key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()
