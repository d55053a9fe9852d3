# src/taskpad/suggest/similarity.py

from __future__ import annotations

from collections.abc import Mapping

from .profiles import CategoryProfile


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost insert/delete/substitute."""
    if len(a) < len(b):
        a, b = b, a
    # a is the longer string; one row per character of the shorter one.
    prev = list(range(len(a) + 1))
    for i in range(1, len(b) + 1):
        cur = [i] + [0] * len(a)
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j - 1], prev[j], cur[j - 1])
        prev = cur
    return prev[len(a)]


def calculate_similarity(a: str, b: str) -> float:
    """
    Normalized similarity in [0, 1]: 1 - distance / len(longer).

    Two empty strings are maximally similar (1.0).
    """
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    if not longer:
        return 1.0
    return (len(longer) - edit_distance(longer, shorter)) / len(longer)


def calculate_keyword_uniqueness(
    keyword: str, category_data: Mapping[str, CategoryProfile]
) -> float:
    """
    1 / number of categories whose keyword table contains `keyword`.

    Returns 1.0 when no category has it. The ranker only asks about keywords
    that already matched a category, so that branch is not hit in practice.
    """
    count = sum(1 for profile in category_data.values() if profile.frequency(keyword) > 0)
    if count == 0:
        return 1.0
    return 1.0 / count
