# src/todo_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the task file into the TaskStore owned by AppState,
- writes the store back to the task file on exit (or on demand).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import StorageError
from ..tasks.task_file import load_tasks, save_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState and populate its store from the task file.

    A missing file is the normal first run. An unreadable file is reported and the
    session starts empty.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    path = Path(settings.tasks_file_path)
    notes: list[tuple[str, str]] = []

    try:
        result = load_tasks(
            path,
            max_tasks=settings.max_tasks,
            max_description_len=settings.max_description_len,
        )
    except StorageError as e:
        logger.error("Failed to load tasks: %s", e)
        notes.append(("error", f"Error: {e}. Starting with an empty list."))
        store = TaskStore(
            max_tasks=settings.max_tasks,
            max_description_len=settings.max_description_len,
        )
        return AppState(settings=settings, task_store=store, startup_notes=notes)

    if not result.found:
        notes.append(("warning", "No existing tasks file found. Starting with an empty list."))
    else:
        for skipped in result.skipped:
            notes.append(
                (
                    "error",
                    f"Warning: Skipping malformed line {skipped.line_no} in tasks file "
                    f"({skipped.reason}): {skipped.line}",
                )
            )
        if result.shortened:
            notes.append(
                (
                    "warning",
                    f"Warning: {result.shortened} description(s) longer than "
                    f"{settings.max_description_len} characters were shortened.",
                )
            )
        if result.truncated:
            notes.append(
                (
                    "warning",
                    f"Warning: task limit of {settings.max_tasks} reached; "
                    f"{result.truncated} line(s) not loaded.",
                )
            )
        notes.append(("ok", f"Loaded {result.loaded} tasks from {path}."))

    return AppState(
        settings=settings,
        task_store=result.store,
        load_result=result,
        startup_notes=notes,
    )


def save_task_store(state: AppState) -> int:
    """Write the whole store to the task file. Raises StorageError; the caller reports it."""
    path = Path(state.settings.tasks_file_path)
    return save_tasks(state.task_store, path)
