# src/todo_manager/tasks/task_file.py

"""
Flat-file persistence for the task list.

One record per line, no header:

    <id>,<completed 0|1>,<description>\\n

The description is everything after the second comma, so commas inside it
survive a round trip. Line breaks inside a description cannot be stored;
TaskStore.add rejects them.

Saving overwrites the file in place (no temp file + rename): a crash mid-write
can leave a truncated file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..config import DEFAULT_MAX_DESCRIPTION_LEN, DEFAULT_MAX_TASKS
from .errors import MalformedRecord, StorageError
from .task_models import Task
from .task_store import TaskStore, strip_line_terminator

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class SkippedLine:
    line_no: int
    line: str
    reason: str


@dataclass(slots=True)
class LoadResult:
    store: TaskStore
    path: Path
    found: bool = True
    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    truncated: int = 0
    shortened: int = 0


# ---- record codec ----


def format_record(task: Task) -> str:
    return f"{task.id}{FIELD_SEPARATOR}{1 if task.completed else 0}{FIELD_SEPARATOR}{task.description}\n"


def parse_record(line: str, *, line_no: int | None = None) -> Task:
    """
    Parse one line into a Task.

    Raises MalformedRecord when the line does not hold a positive decimal id,
    a literal 0 or 1 flag and a non-empty, single-line description.
    """
    raw = strip_line_terminator(line)
    parts = raw.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        raise MalformedRecord(f"expected 3 fields, got {len(parts)}", line=raw, line_no=line_no)

    id_part, flag_part, description = parts

    if not (id_part.isascii() and id_part.isdigit()):
        raise MalformedRecord("id is not a decimal integer", line=raw, line_no=line_no)
    task_id = int(id_part)
    if task_id < 1:
        raise MalformedRecord("id must be positive", line=raw, line_no=line_no)

    if flag_part not in ("0", "1"):
        raise MalformedRecord("completed flag must be 0 or 1", line=raw, line_no=line_no)

    if not description:
        raise MalformedRecord("description is empty", line=raw, line_no=line_no)
    if "\r" in description:
        raise MalformedRecord("line break inside description", line=raw, line_no=line_no)

    return Task(id=task_id, description=description, completed=flag_part == "1")


# ---- load / save ----


def _decode_line(data: bytes, *, line_no: int) -> str:
    """Decode one raw line; a line that is not UTF-8 is malformed on its own."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        shown = strip_line_terminator(data.decode("utf-8", errors="replace"))
        raise MalformedRecord("not valid UTF-8", line=shown, line_no=line_no) from None


def load_tasks(
    path: str | Path,
    *,
    max_tasks: int = DEFAULT_MAX_TASKS,
    max_description_len: int = DEFAULT_MAX_DESCRIPTION_LEN,
) -> LoadResult:
    """
    Build a TaskStore from the task file.

    - missing file -> empty store, found=False (first run, not an error)
    - unreadable file -> StorageError
    - every line that is not a valid record (blank lines and bytes that are not
      UTF-8 included) is skipped with a warning; the other lines still load
    - over-long descriptions are cut to max_description_len (`shortened`)
    - once the store is full the remaining lines are only counted (`truncated`)
    """
    path = Path(path)
    store = TaskStore(max_tasks=max_tasks, max_description_len=max_description_len)
    result = LoadResult(store=store, path=path)

    if not path.exists():
        logger.info("No tasks file at %s; starting with an empty list.", path)
        result.found = False
        return result

    try:
        with path.open("rb") as f:
            for line_no, data in enumerate(f, start=1):
                if store.is_full():
                    result.truncated += 1
                    continue

                raw = ""
                try:
                    raw = strip_line_terminator(_decode_line(data, line_no=line_no))
                    task = parse_record(raw, line_no=line_no)
                    if len(task.description) > max_description_len:
                        logger.warning(
                            "Line %d: description cut from %d to %d characters.",
                            line_no,
                            len(task.description),
                            max_description_len,
                        )
                        task.description = task.description[:max_description_len]
                        result.shortened += 1
                    store.restore(task)
                except MalformedRecord as e:
                    logger.warning("Skipping malformed line %d in %s: %s", line_no, path, e.reason)
                    result.skipped.append(
                        SkippedLine(line_no=line_no, line=e.line or raw, reason=e.reason)
                    )
                    continue

                result.loaded += 1
    except OSError as e:
        raise StorageError("read", path, str(e)) from e

    if result.truncated:
        logger.warning(
            "Task limit %d reached; ignored %d remaining line(s) in %s.",
            max_tasks,
            result.truncated,
            path,
        )

    logger.info(
        "Loaded %d task(s) from %s (skipped=%d, shortened=%d, next_id=%d).",
        result.loaded,
        path,
        len(result.skipped),
        result.shortened,
        store.next_id,
    )
    return result


def save_tasks(tasks: TaskStore | Iterable[Task], path: str | Path) -> int:
    """
    Overwrite the task file with one record per task, in order.

    Returns the number of records written. Raises StorageError on any I/O failure.
    """
    path = Path(path)
    records = [format_record(t) for t in tasks]

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.writelines(records)
    except OSError as e:
        raise StorageError("write", path, e.strerror or str(e)) from e

    logger.info("Saved %d task(s) to %s", len(records), path)
    return len(records)
