# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_file import LoadResult
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one session owns: settings and the single task store.

    Only the session (console loop + menu handlers) mutates `task_store`.
    """

    settings: Any
    task_store: TaskStore

    # Outcome of the startup load, kept for the welcome report.
    load_result: LoadResult | None = None
    # (tone, text) messages collected during bootstrap, printed once the console is up.
    startup_notes: list[tuple[str, str]] = field(default_factory=list)
