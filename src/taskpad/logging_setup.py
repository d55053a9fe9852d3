# src/taskpad/logging_setup.py

"""
Logging for the taskpad console.

The console shares stderr with the task list, so its handler is selective:
store, command and connector logs show at the configured level, the
suggestion engine's per-input scoring trace (DEBUG on `taskpad.suggest`) is
file-only, and anything outside taskpad needs ERROR. The file handler in the
data dir keeps everything.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

APP_LOGGER = "taskpad"
SUGGEST_LOGGER = "taskpad.suggest"

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _is_under(name: str, parent: str) -> bool:
    return name == parent or name.startswith(parent + ".")


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name like "debug" to its number; unknown names give `default`."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def log_file_path(settings: Any) -> Path:
    """`<data_dir>/<app_name>.log`."""
    app_name = str(getattr(settings, "app_name", "") or APP_LOGGER)
    return Path(settings.data_dir) / f"{app_name}.log"


class ConsoleFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if _is_under(name, SUGGEST_LOGGER):
            # scoring traces are too chatty for the prompt
            return record.levelno >= logging.INFO
        if _is_under(name, APP_LOGGER):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    settings: Any,
    *,
    console_level: int | None = None,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the console and file handlers on the root logger and return the
    log file path. Replaces handlers from an earlier call.

    `console_level` defaults to `settings.log_level`.
    """
    if console_level is None:
        console_level = resolve_level(getattr(settings, "log_level", None))

    log_file = log_file_path(settings)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.addFilter(ConsoleFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
