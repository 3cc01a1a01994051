# src/todo_manager/cli/render.py

"""Color & table helpers for the console menu (colorama)."""

from __future__ import annotations

from collections.abc import Sequence

from colorama import Fore, Style, ansi

from ..tasks.task_models import Task

RESET = Style.RESET_ALL
BOLD = Style.BRIGHT

TONE_COLOR = {
    "ok": Fore.GREEN,
    "error": Fore.RED,
    "warning": Fore.YELLOW,
    "info": Fore.CYAN,
    "plain": "",
}

TABLE_RULE = "-" * 40


class Painter:
    """Apply ANSI styles, or pass text through untouched when color is off."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *styles: str) -> str:
        if not self.enabled or not any(styles):
            return text
        return "".join(styles) + text + RESET

    def tone(self, text: str, tone: str) -> str:
        return self(text, TONE_COLOR.get(tone, ""))


def clear_screen_sequence() -> str:
    return ansi.clear_screen() + ansi.Cursor.POS(1, 1)


def render_menu(entries: Sequence[tuple[str, str]], paint: Painter) -> str:
    lines = [paint("--- To-Do List Menu ---", BOLD, Fore.MAGENTA)]
    lines.extend(f"{key}. {label}" for key, label in entries)
    lines.append(paint("-----------------------", BOLD, Fore.MAGENTA))
    return "\n".join(lines)


def render_task_table(tasks: Sequence[Task], paint: Painter) -> str:
    lines = [
        paint("--- Your To-Do Tasks ---", BOLD, Fore.BLUE),
        paint(f"{'ID':<5} {'Status':<10} Description", BOLD),
        TABLE_RULE,
    ]
    for task in tasks:
        if task.completed:
            status = paint("[X]", Fore.GREEN)
            description = paint(task.description, Fore.GREEN)
        else:
            status = paint("[ ]", Fore.RED)
            description = task.description
        # pad the visible status to the column width, not the escape-laden string
        lines.append(f"{task.id:<5} {status}{' ' * 7} {description}")
    lines.append(TABLE_RULE)
    return "\n".join(lines)
