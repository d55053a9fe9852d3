# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every key has a default.
- Malformed values fall back to the default instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _as_limit(value: object, default: int) -> int:
    """Positive int or `default` (bad values and values below 1 fall back)."""
    try:
        n = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return default
    return n if n >= 1 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- UI ----
    default_theme: str
    console_suggestions: bool

    # ---- Suggestion engine ----
    suggestion_limit: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        default_theme = _env(_k("DEFAULT_THEME"), "default").strip().lower() or "default"
        console_suggestions = _env_bool(_k("CONSOLE_SUGGESTIONS"), True)

        suggestion_limit = _as_limit(_env_int(_k("SUGGESTION_LIMIT"), 4), 4)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            default_theme=default_theme,
            console_suggestions=console_suggestions,
            suggestion_limit=suggestion_limit,
        )


SETTINGS = Settings.from_env()


def apply_local_overrides(settings: Settings, local: object) -> None:
    """Apply the few safe overrides a `config_local` module may carry."""
    if hasattr(local, "DEFAULT_THEME"):
        theme = str(local.DEFAULT_THEME).strip().lower() or settings.default_theme
        object.__setattr__(settings, "default_theme", theme)  # type: ignore[misc]
    if hasattr(local, "SUGGESTION_LIMIT"):
        limit = _as_limit(local.SUGGESTION_LIMIT, settings.suggestion_limit)
        object.__setattr__(settings, "suggestion_limit", limit)  # type: ignore[misc]


# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None

if _config_local is not None:
    apply_local_overrides(SETTINGS, _config_local)


def get_settings() -> Settings:
    return SETTINGS
