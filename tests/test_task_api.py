# tests/test_task_api.py

from __future__ import annotations

import logging

import pytest

from todolist.core.errors import EmptyInputError, TaskNotFoundError
from todolist.core.state import AppState
from todolist.storage.kv_store import JsonFileStore
from todolist.tasks import task_api
from todolist.tasks.task_codec import loads_tasks

from .fakes import RecordingStore


def test_load_missing_slot_is_empty() -> None:
    assert task_api.load_tasks(RecordingStore(), "tasks") == []


def test_load_corrupt_slot_is_empty_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    store = RecordingStore({"tasks": "{not json"})
    with caplog.at_level(logging.WARNING, logger="todolist.tasks.task_api"):
        assert task_api.load_tasks(store, "tasks") == []
    assert "corrupt" in caplog.text


def test_in_memory_state_never_writes(state: AppState) -> None:
    task_api.add(state, "buy milk")
    task_api.complete(state, 1)
    assert [t.id for t in state.tasks] == [1]
    assert state.store.writes == []  # type: ignore[attr-defined]


def test_every_mutation_is_persisted(settings) -> None:
    store = RecordingStore()
    state = AppState(settings=settings, store=store, store_slot="tasks", persist=True)

    task_api.add(state, "a")
    task_api.add(state, "b")
    task_api.toggle(state, 1)
    task_api.delete(state, 2)
    task_api.clear_completed(state)

    assert len(store.writes) == 5
    assert loads_tasks(store.data["tasks"]) == state.tasks == []


def test_persisted_tasks_survive_restart(persistent_state: AppState, settings) -> None:
    task_api.add(persistent_state, "buy milk")
    task_api.add(persistent_state, "walk dog")
    task_api.toggle(persistent_state, 2)

    reloaded = task_api.load_tasks(JsonFileStore(settings.store_path), settings.store_slot)
    assert reloaded == persistent_state.tasks
    assert [(t.id, t.completed) for t in reloaded] == [(1, False), (2, True)]


def test_add_rejects_blank_text_without_change(state: AppState) -> None:
    with pytest.raises(EmptyInputError):
        task_api.add(state, "   ")
    assert state.tasks == []


def test_complete_unknown_id_raises_and_keeps_tasks(state: AppState) -> None:
    task_api.add(state, "a")
    before = list(state.tasks)
    with pytest.raises(TaskNotFoundError) as ei:
        task_api.complete(state, 99)
    assert "99" in str(ei.value)
    assert state.tasks == before


def test_toggle_and_delete_unknown_id_are_silent(settings) -> None:
    store = RecordingStore()
    state = AppState(settings=settings, store=store, store_slot="tasks", persist=True)
    task_api.add(state, "a")
    writes = len(store.writes)

    task_api.toggle(state, 7)
    task_api.delete(state, 7)

    assert [t.id for t in state.tasks] == [1]
    assert len(store.writes) == writes


def test_clear_completed_reports_removed_count(state: AppState) -> None:
    for text in ("a", "b", "c"):
        task_api.add(state, text)
    task_api.complete(state, 1)
    task_api.complete(state, 3)

    assert task_api.clear_completed(state) == 2
    assert [t.text for t in state.tasks] == ["b"]


def test_add_blank_text_does_not_write(settings) -> None:
    store = RecordingStore()
    state = AppState(settings=settings, store=store, store_slot="tasks", persist=True)
    with pytest.raises(EmptyInputError):
        task_api.add(state, "")
    assert store.writes == []
    assert state.tasks == []
