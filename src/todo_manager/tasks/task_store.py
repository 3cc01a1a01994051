# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from ..config import DEFAULT_MAX_DESCRIPTION_LEN, DEFAULT_MAX_TASKS
from .errors import (
    CapacityExceeded,
    DuplicateId,
    EmptyDescription,
    InvalidDescription,
    MalformedRecord,
    NotFound,
)
from .task_models import Task

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = ("\r\n", "\n", "\r")


def strip_line_terminator(text: str) -> str:
    """Remove exactly one trailing line terminator, if present."""
    for term in _LINE_TERMINATORS:
        if text.endswith(term):
            return text[: -len(term)]
    return text


class TaskStore:
    """
    In-memory, insertion-ordered task list.

    Ids come from an explicit counter (`last_id`): the highest id ever assigned
    or restored. Deleting the newest task never makes its id available again.

    Lookups are linear scans; the list is bounded by `max_tasks`.
    """

    def __init__(
        self,
        *,
        max_tasks: int = DEFAULT_MAX_TASKS,
        max_description_len: int = DEFAULT_MAX_DESCRIPTION_LEN,
    ) -> None:
        if max_tasks < 1:
            raise ValueError("max_tasks must be >= 1")
        if max_description_len < 1:
            raise ValueError("max_description_len must be >= 1")
        self.max_tasks = max_tasks
        self.max_description_len = max_description_len
        self._tasks: list[Task] = []
        self._last_id = 0

    # ---- introspection ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return (replace(t) for t in self._tasks)

    @property
    def last_id(self) -> int:
        return self._last_id

    @property
    def next_id(self) -> int:
        return self._last_id + 1

    def is_full(self) -> bool:
        return len(self._tasks) >= self.max_tasks

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _clean_description(self, description: str) -> str:
        text = strip_line_terminator(description)
        if not text:
            raise EmptyDescription()
        if "\n" in text or "\r" in text:
            raise InvalidDescription("line breaks are not allowed")
        if len(text) > self.max_description_len:
            logger.warning(
                "Description truncated from %d to %d characters.",
                len(text),
                self.max_description_len,
            )
            text = text[: self.max_description_len]
        return text

    # ---- public API ----

    def add(self, description: str) -> Task:
        if self.is_full():
            raise CapacityExceeded(self.max_tasks)

        text = self._clean_description(description)

        task = Task(id=self._last_id + 1, description=text, completed=False)
        self._tasks.append(task)
        self._last_id = task.id
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return replace(task)

    def restore(self, task: Task) -> Task:
        """
        Append a record that already has an id (used while loading the task file).

        Seeds the id counter so later `add` calls continue past the highest id seen.
        """
        if self.is_full():
            raise CapacityExceeded(self.max_tasks)
        if task.id < 1:
            raise MalformedRecord(f"id must be positive, got {task.id}")
        if self._index_of(task.id) is not None:
            raise DuplicateId(task.id)

        stored = replace(task)
        self._tasks.append(stored)
        self._last_id = max(self._last_id, stored.id)
        return replace(stored)

    def list_tasks(self) -> list[Task]:
        """Snapshot (copies) in insertion order."""
        return [replace(t) for t in self._tasks]

    def find(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return replace(self._tasks[idx]) if idx is not None else None

    def complete(self, task_id: int) -> Task:
        """Mark a task completed. Completing an already-completed task is not an error."""
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFound(task_id)
        task = self._tasks[idx]
        if not task.completed:
            task.completed = True
            logger.debug("Task completed id=%s", task_id)
        return replace(task)

    def delete(self, task_id: int) -> Task:
        """Remove a task; the rest keep their relative order."""
        idx = self._index_of(task_id)
        if idx is None:
            raise NotFound(task_id)
        removed = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return removed
