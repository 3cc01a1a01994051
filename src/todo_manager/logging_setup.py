# src/todo_manager/logging_setup.py

"""
Logging for the console menu.

The menu owns stdout, so the console handler writes to stderr and stays at
WARNING unless TODO_LOG_LEVEL says otherwise. The log file gets everything.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "todo_manager"

# Marks handlers installed here so a second call replaces only those.
_HANDLER_TAG = "_todo_manager_handler"


def resolve_level(name: str | int | None, default: int = logging.WARNING) -> int:
    """Map 'info' / 'DEBUG' / 20 to a logging level; unknown names give `default`."""
    if isinstance(name, int):
        return name
    if not name:
        return default
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


class _AppOnlyFilter(logging.Filter):
    """Console: records from the app pass; anything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(settings, *, file_level: int = logging.DEBUG) -> Path:
    """
    Install a stderr handler at `settings.log_level` and a file handler at
    `settings.log_file_path`. Returns the log file path.
    """
    log_file = Path(settings.log_file_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    console_level = resolve_level(getattr(settings, "log_level", None))

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))

    for h in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = _tagged(logging.StreamHandler(sys.stderr))
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_AppOnlyFilter())
    root.addHandler(console)

    to_file = _tagged(logging.FileHandler(str(log_file), encoding="utf-8"))
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    logging.getLogger(APP_LOGGER).debug(
        "Logging ready console=%s file=%s", logging.getLevelName(console_level), log_file
    )
    return log_file
