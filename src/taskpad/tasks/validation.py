# src/taskpad/tasks/validation.py

"""
Input validation for task text and category names.

Messages are user-facing: command handlers print them as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

TASK_MIN_LENGTH = 3
TASK_MAX_LENGTH = 200
CATEGORY_MAX_LENGTH = 30


class ValidationError(ValueError):
    """Rejected user input. str(exc) is the message to show."""


def validate_task_text(text: str | None, existing_texts: Iterable[str] = ()) -> str:
    """Return the trimmed text or raise ValidationError."""
    clean = (text or "").strip()

    if not clean:
        raise ValidationError("Please enter a task.")
    if len(clean) < TASK_MIN_LENGTH:
        raise ValidationError(f"Task must be at least {TASK_MIN_LENGTH} characters long.")
    if len(clean) > TASK_MAX_LENGTH:
        raise ValidationError(f"Task cannot exceed {TASK_MAX_LENGTH} characters.")

    lowered = clean.lower()
    if any(t.lower() == lowered for t in existing_texts):
        raise ValidationError("This task already exists.")

    return clean


def validate_category_name(name: str | None, existing: Iterable[str] = ()) -> str:
    """Category names are case-sensitive: "Work" and "work" are different."""
    clean = (name or "").strip()

    if not clean:
        raise ValidationError("Please enter a category name.")
    if len(clean) > CATEGORY_MAX_LENGTH:
        raise ValidationError(f"Category cannot exceed {CATEGORY_MAX_LENGTH} characters.")
    if clean in set(existing):
        raise ValidationError(f"Category already exists: {clean}")

    return clean
