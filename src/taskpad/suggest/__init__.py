"""
Category suggestion engine.

Components:
- keywords.py: text -> filtered keyword tokens
- profiles.py: per-category keyword tables built from task history
- similarity.py: edit-distance similarity and keyword uniqueness
- ranker.py: combines all signals into ranked Suggestion objects

Everything here is pure: no I/O, no caching, same input -> same output.
"""
