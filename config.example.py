# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_TASKS_FILE": "Task file path (default: tasks.txt).",
    "TODO_LOG_FILE": "Log file path (default: <data_dir>/todo.log).",
    # Limits
    "TODO_MAX_TASKS": "Maximum number of tasks in the list (default: 100).",
    "TODO_MAX_DESCRIPTION_LEN": "Maximum description length; longer text is truncated (default: 255).",
    # Console
    "TODO_COLOR": "Colored output (true/false, default: true). NO_COLOR also disables it.",
    "TODO_CLEAR_SCREEN": "Clear the terminal on start (true/false, default: true).",
}
