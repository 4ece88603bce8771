# src/todolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Task
from .ports import KeyValueStore


@dataclass
class AppState:
    """
    Everything a running front end owns.

    `tasks` is the single current collection. Operations produce a new list and
    the session helpers in tasks/task_api.py swap it in; previous values are dropped.
    """

    # Settings object (config.Settings or a test double).
    settings: Any

    store: KeyValueStore
    store_slot: str = "tasks"

    # When False the collection lives only in memory for this run.
    persist: bool = False

    tasks: list[Task] = field(default_factory=list)

    # The console loop runs while this is True; `quit` clears it.
    running: bool = True
