# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskFilter
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskRepo

    current_filter: TaskFilter = TaskFilter.ALL
    theme: str = "default"
