# src/todo_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every limit (capacity, description length) is a setting, not a literal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_MAX_TASKS = 100
DEFAULT_MAX_DESCRIPTION_LEN = 255

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


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

    # ---- Local paths ----
    data_dir: Path
    tasks_file_path: Path
    log_file_path: Path

    # ---- Limits ----
    max_tasks: int
    max_description_len: int

    # ---- Console ----
    color_enabled: bool
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_file_path = _env_path(_k("TASKS_FILE"), Path("tasks.txt"))
        log_file_path = _env_path(_k("LOG_FILE"), data_dir / "todo.log")

        max_tasks = _env_int(_k("MAX_TASKS"), DEFAULT_MAX_TASKS)
        max_description_len = _env_int(_k("MAX_DESCRIPTION_LEN"), DEFAULT_MAX_DESCRIPTION_LEN)

        # https://no-color.org: presence of NO_COLOR disables color regardless of value.
        color_enabled = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            log_file_path=log_file_path,
            max_tasks=max_tasks,
            max_description_len=max_description_len,
            color_enabled=color_enabled,
            clear_screen=clear_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
