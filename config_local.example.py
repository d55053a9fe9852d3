# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: start with the dark theme until /theme is used
# DEFAULT_THEME = "dark"

# Example: show fewer suggestions after adding a task
# SUGGESTION_LIMIT = 2
