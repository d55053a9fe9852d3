# src/taskpad/suggest/profiles.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from .keywords import extract_keywords

logger = logging.getLogger(__name__)


class CategorizedText(Protocol):
    """Anything with task text and an optional category (Task satisfies this)."""

    text: str
    category: str | None


@dataclass(slots=True)
class CategoryProfile:
    """Keyword frequencies and task count for one category."""

    keywords: dict[str, int] = field(default_factory=dict)
    task_count: int = 0

    def add_text(self, text: str) -> None:
        self.task_count += 1
        for word in extract_keywords(text.lower()):
            self.keywords[word] = self.keywords.get(word, 0) + 1

    def frequency(self, keyword: str) -> int:
        return self.keywords.get(keyword, 0)


def build_category_data(tasks: Iterable[CategorizedText]) -> dict[str, CategoryProfile]:
    """
    Aggregate keyword tables per category from categorized tasks.

    Tasks without a category (None or "") are skipped, so categories with no
    history are simply absent from the result.
    """
    profiles: dict[str, CategoryProfile] = {}
    for task in tasks:
        category = task.category
        if not category:
            continue
        profiles.setdefault(category, CategoryProfile()).add_text(task.text or "")

    logger.debug("Built category profiles: %d categories", len(profiles))
    return profiles
