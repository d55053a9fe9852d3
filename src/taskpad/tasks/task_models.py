# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_db(cls, raw: str | None) -> Priority:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.MEDIUM


class TaskFilter(StrEnum):
    """Which tasks a list view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    priority: Priority
    category: str | None
    completed: bool
    created_at: float
