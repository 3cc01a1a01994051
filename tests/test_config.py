# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_manager.config import DEFAULT_MAX_DESCRIPTION_LEN, DEFAULT_MAX_TASKS, Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_DATA_DIR",
    "TODO_TASKS_FILE",
    "TODO_LOG_FILE",
    "TODO_MAX_TASKS",
    "TODO_MAX_DESCRIPTION_LEN",
    "TODO_COLOR",
    "TODO_CLEAR_SCREEN",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.tasks_file_path == Path("tasks.txt")
    assert s.data_dir == Path(".local/todo")
    assert s.log_file_path == Path(".local/todo") / "todo.log"
    assert s.max_tasks == DEFAULT_MAX_TASKS == 100
    assert s.max_description_len == DEFAULT_MAX_DESCRIPTION_LEN == 255
    assert s.color_enabled is True
    assert s.clear_screen is True


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_TASKS_FILE", str(tmp_path / "mine.txt"))
    monkeypatch.setenv("TODO_MAX_TASKS", "7")
    monkeypatch.setenv("TODO_MAX_DESCRIPTION_LEN", "40")
    monkeypatch.setenv("TODO_COLOR", "off")
    monkeypatch.setenv("TODO_CLEAR_SCREEN", "0")

    s = Settings.from_env()

    assert s.tasks_file_path == tmp_path / "mine.txt"
    assert s.max_tasks == 7
    assert s.max_description_len == 40
    assert s.color_enabled is False
    assert s.clear_screen is False


def test_bad_and_non_positive_limits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_MAX_TASKS", "lots")
    monkeypatch.setenv("TODO_MAX_DESCRIPTION_LEN", "-5")

    s = Settings.from_env()

    assert s.max_tasks == DEFAULT_MAX_TASKS
    assert s.max_description_len == 1


def test_no_color_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_COLOR", "true")
    monkeypatch.setenv("NO_COLOR", "")

    assert Settings.from_env().color_enabled is False
