# src/todolist/tasks/task_store.py

"""
Task collection operations.

Every function here is a pure transformation: it takes the current collection,
returns a new list, and never mutates its argument or any Task in it. The caller
(see core/state.py) owns the single current value.

Ids are allocated as max(existing) + 1, which assumes a single writer.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..core.errors import EmptyInputError
from .task_models import Task, TaskCollection, utc_timestamp

EMPTY_MESSAGE = "No tasks yet."


def next_id(tasks: Sequence[Task]) -> int:
    if not tasks:
        return 1
    return max(t.id for t in tasks) + 1


def find_task(tasks: Sequence[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def add_task(
    tasks: Sequence[Task], text: str, *, created_at: str | None = None
) -> tuple[TaskCollection, Task]:
    """
    Append a new, not completed task.

    Blank text is a precondition violation (front ends validate before calling).
    The text is stored exactly as given.
    """
    if not text or not text.strip():
        raise EmptyInputError("Task text cannot be empty.")

    task = Task(
        id=next_id(tasks),
        text=text,
        completed=False,
        created_at=created_at or utc_timestamp(),
    )
    return [*tasks, task], task


def format_task(task: Task) -> str:
    marker = "x" if task.completed else " "
    return f"[{marker}] {task.id} - {task.text}"


def list_tasks(tasks: Sequence[Task]) -> list[str]:
    if not tasks:
        return [EMPTY_MESSAGE]
    return [format_task(t) for t in tasks]


def mark_done(tasks: Sequence[Task], task_id: int) -> TaskCollection:
    """Set completed on the matching task. Unknown id or already done: unchanged."""
    return [replace(t, completed=True) if t.id == task_id else t for t in tasks]


def toggle_task(tasks: Sequence[Task], task_id: int) -> TaskCollection:
    return [replace(t, completed=not t.completed) if t.id == task_id else t for t in tasks]


def delete_task(tasks: Sequence[Task], task_id: int) -> TaskCollection:
    return [t for t in tasks if t.id != task_id]


def clear_completed(tasks: Sequence[Task]) -> TaskCollection:
    return [t for t in tasks if not t.completed]
