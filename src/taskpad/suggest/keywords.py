# src/taskpad/suggest/keywords.py

from __future__ import annotations

import re

# Common English function words. Immutable, shared process-wide.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "about", "after", "again", "all", "also", "am", "an", "and", "any",
        "are", "as", "at", "be", "because", "been", "before", "being", "both", "but",
        "by", "can", "could", "did", "do", "does", "down", "each", "few", "for",
        "from", "had", "has", "have", "he", "her", "here", "his", "how", "i",
        "if", "in", "into", "is", "it", "its", "just", "may", "me", "might",
        "more", "most", "must", "my", "no", "not", "of", "off", "on", "once",
        "only", "or", "other", "our", "out", "over", "own", "same", "shall", "she",
        "should", "so", "some", "such", "than", "that", "the", "their", "them", "then",
        "there", "these", "they", "this", "those", "to", "too", "under", "until", "up",
        "very", "was", "we", "were", "what", "when", "where", "which", "while", "who",
        "whom", "why", "will", "with", "would", "you", "your",
    }
)

MIN_KEYWORD_LENGTH = 3

_DELIMITERS = re.compile(r"[\s,.:;!?()\-]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def extract_keywords(text: str) -> list[str]:
    """
    Split text into meaningful keyword tokens.

    The caller is expected to lower-case the text first; uppercase letters are
    stripped like any other character outside [a-z0-9]. Order and duplicates
    are preserved because keyword frequency matters downstream.
    """
    out: list[str] = []
    for fragment in _DELIMITERS.split(text or ""):
        word = _NON_ALNUM.sub("", fragment)
        if len(word) < MIN_KEYWORD_LENGTH:
            continue
        if word in STOP_WORDS:
            continue
        out.append(word)
    return out
