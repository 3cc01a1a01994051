# src/todo_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    - id: positive, unique for the lifetime of the store (never reused after delete)
    - description: non-empty single line of text
    - completed: only ever goes False -> True
    """

    id: int
    description: str
    completed: bool = False
