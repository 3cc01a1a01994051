# tests/test_commands.py

from __future__ import annotations

import pytest

from todo_manager.cli.commands import (
    EXIT_CHOICE,
    INVALID_NUMBER,
    MenuRegistry,
    MenuReply,
    cmd_add,
    cmd_complete,
    cmd_delete,
    cmd_view,
    parse_int,
    registry,
)
from todo_manager.core.state import AppState

from .fakes import FakePrompt


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("3", 3), ("  12 \n", 12), ("-1", -1), ("", None), ("abc", None), ("3x", None), ("1 2", None)],
)
def test_parse_int(raw: str, expected: int | None) -> None:
    assert parse_int(raw) == expected


def test_menu_lists_five_entries_in_order() -> None:
    assert registry.entries() == [
        ("1", "Add Task"),
        ("2", "View Tasks"),
        ("3", "Mark Task as Complete"),
        ("4", "Delete Task"),
        (str(EXIT_CHOICE), "Exit"),
    ]


def test_registry_routes_and_rejects_unknown(state: AppState) -> None:
    reg = MenuRegistry()
    called = {"n": 0}

    def handler(state, ask):
        called["n"] += 1
        return MenuReply("hi", "ok")

    reg.register(1, "Hello", handler)

    assert reg.handle(state, 1, FakePrompt()) == MenuReply("hi", "ok")
    assert called["n"] == 1
    assert reg.handle(state, 9, FakePrompt()).text == "Invalid choice. Please try again."


def test_add_reports_new_id(state: AppState) -> None:
    ask = FakePrompt(["Buy milk"])

    reply = cmd_add(state, ask)

    assert reply == MenuReply("Task added successfully! (ID: 1)", "ok")
    assert ask.prompts == ["Enter task description: "]
    assert state.task_store.find(1).description == "Buy milk"


def test_add_empty_description_is_reported(state: AppState) -> None:
    reply = cmd_add(state, FakePrompt([""]))

    assert reply.tone == "error"
    assert "cannot be empty" in reply.text
    assert state.task_store.is_empty()


def test_add_when_full_does_not_prompt(state: AppState) -> None:
    for i in range(state.task_store.max_tasks):
        state.task_store.add(f"t{i}")
    ask = FakePrompt(["never read"])

    reply = cmd_add(state, ask)

    assert reply.tone == "error"
    assert "full" in reply.text
    assert ask.prompts == []


def test_view_empty_and_table(state: AppState) -> None:
    assert cmd_view(state, FakePrompt()).text == "No tasks to display. Add some tasks first!"

    state.task_store.add("Buy milk")
    state.task_store.add("Walk dog")
    state.task_store.complete(2)
    text = cmd_view(state, FakePrompt()).text

    lines = text.splitlines()
    assert "ID" in lines[1] and "Status" in lines[1] and "Description" in lines[1]
    assert any(line.startswith("1") and "[ ]" in line and "Buy milk" in line for line in lines)
    assert any(line.startswith("2") and "[X]" in line and "Walk dog" in line for line in lines)
    # color disabled in test settings
    assert "\x1b[" not in text


def test_complete_flow(state: AppState) -> None:
    state.task_store.add("Buy milk")

    assert cmd_complete(state, FakePrompt(["1"])) == MenuReply("Task ID 1 marked as complete.", "ok")
    assert cmd_complete(state, FakePrompt(["1"])).tone == "ok"
    assert state.task_store.find(1).completed is True
    assert cmd_complete(state, FakePrompt(["7"])) == MenuReply("Task with ID 7 not found.", "error")


def test_complete_and_delete_reject_non_numeric_id(state: AppState) -> None:
    state.task_store.add("Buy milk")

    assert cmd_complete(state, FakePrompt(["one"])) == MenuReply(INVALID_NUMBER, "error")
    assert cmd_delete(state, FakePrompt(["1abc"])) == MenuReply(INVALID_NUMBER, "error")
    assert state.task_store.list_tasks()[0].completed is False
    assert len(state.task_store) == 1


def test_complete_and_delete_on_empty_store_skip_prompt(state: AppState) -> None:
    ask = FakePrompt(["1"])

    assert cmd_complete(state, ask).text == "No tasks to mark complete. Add tasks first!"
    assert cmd_delete(state, ask).text == "No tasks to delete."
    assert ask.prompts == []


def test_delete_flow(state: AppState) -> None:
    state.task_store.add("a")
    state.task_store.add("b")

    assert cmd_delete(state, FakePrompt(["1"])) == MenuReply("Task ID 1 deleted successfully.", "ok")
    assert cmd_delete(state, FakePrompt(["1"])) == MenuReply("Task with ID 1 not found.", "error")
    assert [t.id for t in state.task_store.list_tasks()] == [2]
