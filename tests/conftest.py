# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.state import AppState
from todolist.storage.kv_store import JsonFileStore

from .fakes import RecordingStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todolist-test",
        log_level="DEBUG",
        frontend="console",
        console_persist=False,
        data_dir=tmp_path / "data",
        store_path=tmp_path / "data" / "store.json",
        store_slot="tasks",
        web_host="127.0.0.1",
        web_port=8000,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """In-memory console state (the default console variant)."""
    return AppState(settings=settings, store=RecordingStore(), store_slot="tasks", persist=False)


@pytest.fixture()
def persistent_state(settings: SimpleNamespace) -> AppState:
    """
    Persistent state over a real JSON file store.

    NOTE: the file store is kept real here because its atomic write is part of
    what the web page relies on.
    """
    return AppState(
        settings=settings,
        store=JsonFileStore(settings.store_path),
        store_slot=settings.store_slot,
        persist=True,
    )
