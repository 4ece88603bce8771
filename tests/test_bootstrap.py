# tests/test_bootstrap.py

from __future__ import annotations

import json

from todolist.cli.bootstrap import create_initial_state
from todolist.storage.kv_store import MemoryStore
from todolist.tasks.task_codec import dumps_tasks
from todolist.tasks.task_models import Task


def _seed(settings, blob: str) -> None:
    # the store file maps slot -> string, so the blob is embedded as a JSON string
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)
    settings.store_path.write_text(json.dumps({"tasks": blob}), "utf-8")


def test_console_default_is_in_memory(settings) -> None:
    task = Task(id=1, text="old", completed=False, created_at="2026-10-18T09:30:00.000Z")
    _seed(settings, dumps_tasks([task]))

    state = create_initial_state(settings=settings)

    assert state.persist is False
    assert isinstance(state.store, MemoryStore)
    assert state.tasks == []
    assert settings.data_dir.is_dir()


def test_web_loads_stored_tasks(settings) -> None:
    task = Task(id=4, text="old", completed=True, created_at="2026-10-18T09:30:00.000Z")
    _seed(settings, dumps_tasks([task]))
    settings.frontend = "web"

    state = create_initial_state(settings=settings)

    assert state.persist is True
    assert state.tasks == [task]


def test_console_persist_flag_loads_and_corrupt_slot_starts_empty(settings) -> None:
    _seed(settings, "[{oops")
    settings.console_persist = True

    state = create_initial_state(settings=settings)

    assert state.persist is True
    assert state.tasks == []
