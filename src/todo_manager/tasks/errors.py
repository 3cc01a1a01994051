# src/todo_manager/tasks/errors.py

"""
Errors raised by the task store and the task file codec.

Every kind is recoverable: the menu layer catches TaskError, reports the
message and keeps running.
"""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for all task-list errors."""


class CapacityExceeded(TaskError):
    def __init__(self, max_tasks: int) -> None:
        super().__init__(f"Task list is full ({max_tasks} tasks). Cannot add more tasks.")
        self.max_tasks = max_tasks


class EmptyDescription(TaskError):
    def __init__(self) -> None:
        super().__init__("Task description cannot be empty. Task not added.")


class InvalidDescription(TaskError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid task description: {reason}. Task not added.")
        self.reason = reason


class NotFound(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class StorageError(TaskError):
    """The task file could not be opened, read or written."""

    def __init__(self, action: str, path: str | Path, detail: str = "") -> None:
        msg = f"Could not {action} tasks file {path}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.action = action
        self.path = Path(path)


class MalformedRecord(TaskError):
    """A line of the task file does not parse into id, flag and description."""

    def __init__(self, reason: str, *, line: str = "", line_no: int | None = None) -> None:
        where = f"line {line_no}" if line_no is not None else "record"
        super().__init__(f"Malformed {where}: {reason}: {line!r}")
        self.reason = reason
        self.line = line
        self.line_no = line_no


class DuplicateId(MalformedRecord):
    def __init__(self, task_id: int, *, line: str = "", line_no: int | None = None) -> None:
        super().__init__(f"duplicate id {task_id}", line=line, line_no=line_no)
        self.task_id = task_id
