# src/todo_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from ..core.state import AppState
from ..tasks.errors import TaskError
from .render import Painter, render_task_table

logger = logging.getLogger(__name__)

Tone = Literal["ok", "error", "warning", "info", "plain"]
Prompt = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class MenuReply:
    text: str
    tone: Tone = "plain"


MenuHandler = Callable[[AppState, Prompt], MenuReply]

INVALID_NUMBER = "Invalid input. Please enter a number."

EXIT_CHOICE = 5


def parse_int(raw: str) -> int | None:
    """
    Strict integer parsing for a line the user already typed.

    Surrounding whitespace is fine; anything else ("3x", "", "1 2") is invalid.
    """
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


parse_choice = parse_int
parse_task_id = parse_int


class MenuRegistry:
    """Numbered menu: choice -> (label, handler)."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, label: str, handler: MenuHandler | None = None) -> None:
        """Register a menu entry. Entries without a handler are shown but handled by the caller (Exit)."""
        self._labels[choice] = label
        if handler is not None:
            self._handlers[choice] = handler

    def entries(self) -> list[tuple[str, str]]:
        return [(str(k), self._labels[k]) for k in sorted(self._labels)]

    def handle(self, state: AppState, choice: int, ask: Prompt) -> MenuReply:
        handler = self._handlers.get(choice)
        if handler is None:
            return MenuReply("Invalid choice. Please try again.", "error")
        return handler(state, ask)


registry = MenuRegistry()


def _painter(state: AppState) -> Painter:
    return Painter(bool(getattr(state.settings, "color_enabled", False)))


def _ask_task_id(ask: Prompt, prompt: str) -> int | None:
    return parse_task_id(ask(prompt))


def cmd_add(state: AppState, ask: Prompt) -> MenuReply:
    store = state.task_store
    if store.is_full():
        # Refuse before prompting for a description.
        logger.info("Add rejected: store full (%d).", store.max_tasks)
        return MenuReply("Task list is full. Cannot add more tasks.", "error")

    description = ask("Enter task description: ")
    try:
        task = store.add(description)
    except TaskError as e:
        logger.info("Add rejected: %s", e)
        return MenuReply(str(e), "error")

    logger.info("Task added id=%s", task.id)
    return MenuReply(f"Task added successfully! (ID: {task.id})", "ok")


def cmd_view(state: AppState, ask: Prompt) -> MenuReply:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return MenuReply("No tasks to display. Add some tasks first!", "warning")
    return MenuReply(render_task_table(tasks, _painter(state)), "plain")


def cmd_complete(state: AppState, ask: Prompt) -> MenuReply:
    store = state.task_store
    if store.is_empty():
        return MenuReply("No tasks to mark complete. Add tasks first!", "warning")

    task_id = _ask_task_id(ask, "Enter the ID of the task to mark as complete: ")
    if task_id is None:
        return MenuReply(INVALID_NUMBER, "error")

    try:
        store.complete(task_id)
    except TaskError as e:
        logger.info("Complete failed: %s", e)
        return MenuReply(str(e), "error")

    logger.info("Task completed id=%s", task_id)
    return MenuReply(f"Task ID {task_id} marked as complete.", "ok")


def cmd_delete(state: AppState, ask: Prompt) -> MenuReply:
    store = state.task_store
    if store.is_empty():
        return MenuReply("No tasks to delete.", "warning")

    task_id = _ask_task_id(ask, "Enter the ID of the task to delete: ")
    if task_id is None:
        return MenuReply(INVALID_NUMBER, "error")

    try:
        store.delete(task_id)
    except TaskError as e:
        logger.info("Delete failed: %s", e)
        return MenuReply(str(e), "error")

    logger.info("Task deleted id=%s", task_id)
    return MenuReply(f"Task ID {task_id} deleted successfully.", "ok")


registry.register(1, "Add Task", cmd_add)
registry.register(2, "View Tasks", cmd_view)
registry.register(3, "Mark Task as Complete", cmd_complete)
registry.register(4, "Delete Task", cmd_delete)
registry.register(EXIT_CHOICE, "Exit")
