# src/todolist/tasks/task_codec.py

"""
Persisted representation of a task collection.

A single JSON array of objects with the keys id, text, completed and createdAt
(the same shape the browser page keeps under its storage slot).
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ..core.errors import StorageCorruptError
from .task_models import Task, TaskCollection


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": task.created_at,
    }


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise StorageCorruptError(f"task entry is not an object: {raw!r}")

    tid = raw.get("id")
    text = raw.get("text")
    completed = raw.get("completed")
    created_at = raw.get("createdAt")

    # bool is an int subclass; reject it as an id.
    if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
        raise StorageCorruptError(f"invalid task id: {tid!r}")
    if not isinstance(text, str) or not text.strip():
        raise StorageCorruptError(f"invalid text for task {tid}")
    if not isinstance(completed, bool):
        raise StorageCorruptError(f"invalid completed flag for task {tid}")
    if not isinstance(created_at, str):
        raise StorageCorruptError(f"invalid createdAt for task {tid}")

    return Task(id=tid, text=text, completed=completed, created_at=created_at)


def dumps_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def loads_tasks(raw: str) -> TaskCollection:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise StorageCorruptError(f"stored tasks are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise StorageCorruptError("stored tasks are not a JSON array")

    tasks = [task_from_dict(item) for item in data]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise StorageCorruptError(f"duplicate task id: {t.id}")
        seen.add(t.id)

    return tasks
