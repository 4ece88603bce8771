# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the key-value store into AppState,
- loads the persisted collection when the chosen front end persists.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import JsonFileStore, MemoryStore
from ..tasks.task_api import load_tasks

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    The web page always persists. The console keeps tasks in memory for the run
    unless console_persist is set.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    persist = settings.frontend == "web" or bool(settings.console_persist)
    store: KeyValueStore = JsonFileStore(settings.store_path) if persist else MemoryStore()

    state = AppState(
        settings=settings,
        store=store,
        store_slot=settings.store_slot,
        persist=persist,
    )
    if persist:
        state.tasks = load_tasks(store, settings.store_slot)

    logger.info(
        "State ready frontend=%s persist=%s tasks=%d",
        settings.frontend,
        persist,
        len(state.tasks),
    )
    return state
