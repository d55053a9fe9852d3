# src/taskpad/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from urllib.parse import quote

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..suggest.ranker import DEFAULT_LIMIT, Suggestion, suggest_categories
from .task_models import Priority, Task, TaskFilter
from .validation import ValidationError

logger = logging.getLogger(__name__)

THEMES = ("default", "dark", "ocean", "forest", "sunset")
THEME_PREFERENCE_KEY = "theme"

# Characters encodeURIComponent leaves as-is (besides alphanumerics).
_URI_COMPONENT_SAFE = "-_.!~*'()"


def create_task(
    state: AppState,
    text: str,
    *,
    priority: Priority | str = Priority.MEDIUM,
    category: str | None = None,
) -> Task:
    """
    Convenience helper: validate and store a task.
    Raises ValidationError with a user-facing message on bad input.
    """
    task = state.task_store.add_task(
        text=text,
        priority=Priority.from_db(str(priority)),
        category=category,
    )
    logger.info("Task created id=%s", task.id)
    return task


def filter_tasks(tasks: Sequence[Task], task_filter: TaskFilter) -> list[Task]:
    if task_filter is TaskFilter.ACTIVE:
        return [t for t in tasks if not t.completed]
    if task_filter is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def active_count_label(tasks: Sequence[Task]) -> str:
    n = sum(1 for t in tasks if not t.completed)
    return f"{n} {'task' if n == 1 else 'tasks'}"


def empty_state_message(task_filter: TaskFilter) -> str:
    if task_filter is TaskFilter.ALL:
        return "No tasks yet. Add one above to get started!"
    return f"No {task_filter.value} tasks."


def build_share_link(task: Task) -> str:
    """mailto: link with the task details in subject and body."""
    created = datetime.fromtimestamp(task.created_at).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    subject = f"Task: {task.text}"
    body = (
        "Task Details:\n\n"
        f"Task: {task.text}\n"
        f"Priority: {task.priority.value.upper()}\n"
        f"Status: {'Completed' if task.completed else 'Active'}\n"
        f"Created: {created}\n\n"
        "Shared from Task Manager"
    )
    return (
        f"mailto:?subject={quote(subject, safe=_URI_COMPONENT_SAFE)}"
        f"&body={quote(body, safe=_URI_COMPONENT_SAFE)}"
    )


def suggest_for_text(repo: TaskRepo, text: str, *, limit: int = DEFAULT_LIMIT) -> list[Suggestion]:
    """Run the suggestion engine against the repo's current tasks and categories."""
    return suggest_categories(text, repo.list_categories(), repo.list_tasks(), limit=limit)


def load_theme(state: AppState) -> str:
    default = str(getattr(state.settings, "default_theme", "default"))
    theme = state.task_store.get_preference(THEME_PREFERENCE_KEY, default) or default
    return theme if theme in THEMES else "default"


def change_theme(state: AppState, theme: str) -> str:
    name = (theme or "").strip().lower()
    if name not in THEMES:
        raise ValidationError(f"Unknown theme: {theme}. Available: {', '.join(THEMES)}")
    state.task_store.set_preference(THEME_PREFERENCE_KEY, name)
    state.theme = name
    return name
