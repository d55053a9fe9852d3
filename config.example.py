# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Local overrides go in:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # UI
    "TASKPAD_DEFAULT_THEME": "Theme used until one is chosen with /theme (default: default).",
    "TASKPAD_CONSOLE_SUGGESTIONS": "Show category suggestions after adding a task (true/false).",
    # Suggestion engine
    "TASKPAD_SUGGESTION_LIMIT": "Max suggested categories per task (default: 4).",
}
