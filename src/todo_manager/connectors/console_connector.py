# src/todo_manager/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from colorama import Fore

from ..cli.bootstrap import save_task_store
from ..cli.commands import EXIT_CHOICE, INVALID_NUMBER, MenuReply, parse_choice
from ..cli.commands import registry as menu_registry
from ..cli.render import BOLD, Painter, clear_screen_sequence, render_menu
from ..core.state import AppState
from ..tasks.errors import StorageError

logger = logging.getLogger(__name__)


def _save_and_say_goodbye(state: AppState, paint: Painter) -> bool:
    print(paint("Exiting program. Saving tasks...", Fore.YELLOW))
    try:
        count = save_task_store(state)
    except StorageError as e:
        logger.error("Save on exit failed: %s", e)
        print(paint(f"Error: {e}. Tasks were not saved.", Fore.RED))
        return False

    logger.info("Saved %d task(s) on exit.", count)
    print(paint("Tasks saved successfully. Goodbye!", Fore.GREEN))
    return True


def run_console_loop(state: AppState) -> bool:
    """
    Numbered-menu REPL. Returns True if the final save succeeded.

    Input is read a whole line at a time, so anything typed after an invalid
    number is discarded with it and never read as the next menu choice.
    """
    settings = state.settings
    paint = Painter(bool(getattr(settings, "color_enabled", False)))

    def ask(prompt: str) -> str:
        return input(paint(prompt, Fore.CYAN))

    logger.info("Console started (tasks=%d).", len(state.task_store))

    if getattr(settings, "clear_screen", False) and sys.stdout.isatty():
        print(clear_screen_sequence(), end="", flush=True)

    print(paint("Welcome to the To-Do List Manager!", BOLD, Fore.BLUE))
    for tone, text in state.startup_notes:
        print(paint.tone(text, tone))
    print()

    while True:
        print(render_menu(menu_registry.entries(), paint))
        try:
            raw = input(paint("Enter your choice: ", BOLD, Fore.CYAN))
            choice = parse_choice(raw)
            if choice is None:
                reply = MenuReply(INVALID_NUMBER, "error")
            elif choice == EXIT_CHOICE:
                logger.info("Console exit selected.")
                return _save_and_say_goodbye(state, paint)
            else:
                reply = menu_registry.handle(state, choice, ask)
        except EOFError:
            logger.info("Console EOF received, saving and exiting.")
            print()
            return _save_and_say_goodbye(state, paint)
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, saving and exiting.")
            print()
            return _save_and_say_goodbye(state, paint)
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = MenuReply("Internal error while handling the menu choice.", "error")

        print(paint.tone(reply.text, reply.tone))
        print()
