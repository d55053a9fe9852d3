# src/taskpad/suggest/ranker.py

"""
Suggestion ranker.

Scores every known category against a piece of task text and returns the best
few. Signals are additive:

- name match: exact (+50) / input contains name (+30) / name contains input (+20)
- fuzzy name similarity above 0.6: +floor(similarity * 15)
- keyword overlap with the category history: frequency * uniqueness * 3
- substring keyword fuzz: category keyword frequency * 0.5
- popularity: ln(task_count + 1) * 0.5

Confidence is the score scaled against the 50-point exact-match anchor, so an
exact name match alone reads as 100%.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .keywords import extract_keywords
from .profiles import CategorizedText, CategoryProfile, build_category_data
from .similarity import calculate_keyword_uniqueness, calculate_similarity

logger = logging.getLogger(__name__)

MIN_INPUT_LENGTH = 3
DEFAULT_LIMIT = 4
MAX_MATCH_REASONS = 3

EXACT_MATCH_POINTS = 50
CONTAINS_CATEGORY_POINTS = 30
PARTIAL_CATEGORY_POINTS = 20

SIMILARITY_THRESHOLD = 0.6
SIMILARITY_POINTS = 15
KEYWORD_WEIGHT = 3
SUBSTRING_MIN_LENGTH = 4
SUBSTRING_WEIGHT = 0.5
POPULARITY_WEIGHT = 0.5

MIN_SCORE = 2
CONFIDENCE_ANCHOR = 50


@dataclass(slots=True, frozen=True)
class Suggestion:
    category: str
    score: float
    confidence: int
    matches: tuple[str, ...]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _dedupe(items: Iterable[str], limit: int) -> tuple[str, ...]:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(items))[:limit]


def _score_category(
    text: str,
    category: str,
    input_keywords: Sequence[str],
    category_data: dict[str, CategoryProfile],
) -> tuple[float, list[str]]:
    name = category.lower()
    score = 0.0
    matches: list[str] = []

    if text == name:
        score += EXACT_MATCH_POINTS
        matches.append("exact match")
    elif name in text:
        score += CONTAINS_CATEGORY_POINTS
        matches.append("contains category")
    elif text in name:
        score += PARTIAL_CATEGORY_POINTS
        matches.append("partial category")

    similarity = calculate_similarity(text, name)
    if similarity > SIMILARITY_THRESHOLD:
        score += math.floor(similarity * SIMILARITY_POINTS)
        matches.append(f"{_round_half_up(similarity * 100)}% similar")

    profile = category_data.get(category) or CategoryProfile()

    for keyword in input_keywords:
        frequency = profile.frequency(keyword)
        if frequency:
            uniqueness = calculate_keyword_uniqueness(keyword, category_data)
            score += frequency * uniqueness * KEYWORD_WEIGHT
            matches.append(keyword)

    # An input keyword that is also in the table scores again here.
    for category_keyword, frequency in profile.keywords.items():
        for keyword in input_keywords:
            if len(keyword) >= SUBSTRING_MIN_LENGTH and keyword in category_keyword:
                score += frequency * SUBSTRING_WEIGHT

    score += math.log(profile.task_count + 1) * POPULARITY_WEIGHT
    return score, matches


def suggest_categories(
    input_text: str,
    categories: Sequence[str],
    tasks: Iterable[CategorizedText],
    *,
    limit: int = DEFAULT_LIMIT,
) -> list[Suggestion]:
    """
    Rank `categories` for `input_text` using the categorized `tasks` as history.

    Returns an empty list when the trimmed input is shorter than 3 characters
    or there are no categories. Ties keep the order of `categories`.
    """
    text = (input_text or "").strip().lower()
    if len(text) < MIN_INPUT_LENGTH or not categories:
        return []

    category_data = build_category_data(tasks)
    input_keywords = extract_keywords(text)

    suggestions: list[Suggestion] = []
    for category in categories:
        score, matches = _score_category(text, category, input_keywords, category_data)
        if score <= MIN_SCORE:
            continue
        confidence = min(100, math.floor(score / CONFIDENCE_ANCHOR * 100))
        suggestions.append(
            Suggestion(
                category=category,
                score=score,
                confidence=confidence,
                matches=_dedupe(matches, MAX_MATCH_REASONS),
            )
        )

    # sorted() is stable: equal scores keep category order.
    suggestions = sorted(suggestions, key=lambda s: s.score, reverse=True)[: max(0, limit)]
    logger.debug(
        "Suggestions for %r: %s",
        text,
        [(s.category, round(s.score, 2)) for s in suggestions],
    )
    return suggestions
