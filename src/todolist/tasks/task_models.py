# src/todolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-18T09:30:00.000Z."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool
    created_at: str


# Ordered, ids unique. Operations never mutate a collection in place.
TaskCollection = list[Task]
