# src/taskpad/core/ports.py

"""
Ports (interfaces) used by the application layer.

Helpers depend on Protocols instead of the concrete SQLite store.
This keeps storage swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Priority, Task


class TaskRepo(Protocol):
    # Read side (list views, suggestion engine input)
    def list_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def list_categories(self) -> list[str]: ...

    # Write side
    def add_task(
            self,
            *,
            text: str,
            priority: Priority = Priority.MEDIUM,
            category: str | None = None,
    ) -> Task: ...
    def toggle_task(self, task_id: int) -> Task | None: ...
    def delete_task(self, task_id: int) -> bool: ...
    def set_task_category(self, task_id: int, category: str | None) -> bool: ...
    def add_category(self, name: str) -> str: ...
    def delete_category(self, name: str) -> int: ...

    # Preferences (theme)
    def get_preference(self, key: str, default: str | None = None) -> str | None: ...
    def set_preference(self, key: str, value: str) -> None: ...
