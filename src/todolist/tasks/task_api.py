# src/todolist/tasks/task_api.py

"""
Session helpers shared by both front ends.

Each mutating helper applies one task_store operation to state.tasks, swaps the
new collection in and, when the state is persistent, rewrites the whole stored
blob before returning.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.errors import StorageCorruptError, TaskNotFoundError
from ..core.ports import KeyValueStore
from ..core.state import AppState
from . import task_store
from .task_codec import dumps_tasks, loads_tasks
from .task_models import Task

logger = logging.getLogger(__name__)


def load_tasks(store: KeyValueStore, slot: str) -> list[Task]:
    """Read the collection once at startup. Corrupt data means "no tasks"."""
    raw = store.get(slot)
    if raw is None:
        return []
    try:
        tasks = loads_tasks(raw)
    except StorageCorruptError as e:
        logger.warning("Stored tasks in slot=%s are corrupt (%s); starting empty.", slot, e)
        return []
    logger.info("Loaded %d tasks from slot=%s", len(tasks), slot)
    return tasks


def save_tasks(store: KeyValueStore, slot: str, tasks: Sequence[Task]) -> None:
    store.set(slot, dumps_tasks(tasks))
    logger.debug("Saved %d tasks to slot=%s", len(tasks), slot)


def _commit(state: AppState, tasks: list[Task]) -> None:
    state.tasks = tasks
    if state.persist:
        save_tasks(state.store, state.store_slot, tasks)


def add(state: AppState, text: str) -> Task:
    """Raises EmptyInputError (from task_store.add_task) for blank text; state is left as is."""
    tasks, task = task_store.add_task(state.tasks, text)
    _commit(state, tasks)
    logger.debug("Task added id=%s", task.id)
    return task


def complete(state: AppState, task_id: int) -> None:
    """Mark a task done; unlike task_store.mark_done, an unknown id is an error here."""
    if task_store.find_task(state.tasks, task_id) is None:
        raise TaskNotFoundError(task_id)
    _commit(state, task_store.mark_done(state.tasks, task_id))
    logger.debug("Task done id=%s", task_id)


def toggle(state: AppState, task_id: int) -> None:
    if task_store.find_task(state.tasks, task_id) is None:
        return
    _commit(state, task_store.toggle_task(state.tasks, task_id))
    logger.debug("Task toggled id=%s", task_id)


def delete(state: AppState, task_id: int) -> None:
    if task_store.find_task(state.tasks, task_id) is None:
        return
    _commit(state, task_store.delete_task(state.tasks, task_id))
    logger.debug("Task deleted id=%s", task_id)


def clear_completed(state: AppState) -> int:
    """Drop completed tasks; returns how many were removed."""
    remaining = task_store.clear_completed(state.tasks)
    removed = len(state.tasks) - len(remaining)
    _commit(state, remaining)
    if removed:
        logger.debug("Cleared %d completed tasks", removed)
    return removed
