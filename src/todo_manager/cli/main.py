# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console menu in the main thread. The menu's Exit saves the task file.
"""

from __future__ import annotations

import logging

from colorama import just_fix_windows_console

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    setup_logging(settings)
    just_fix_windows_console()

    logger.info("Starting %s (tasks file=%s)...", settings.app_name, settings.tasks_file_path)

    state = create_initial_state(settings=settings)
    saved = run_console_loop(state)

    logger.info("Bye.")
    return 0 if saved else 1


if __name__ == "__main__":
    raise SystemExit(main())
