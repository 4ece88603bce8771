# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "FRONTEND",
    "CONSOLE_PERSIST",
    "DATA_DIR",
    "STORE_PATH",
    "STORE_SLOT",
    "WEB_HOST",
    "WEB_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in _VARS:
        monkeypatch.delenv(f"TODO_{suffix}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "todolist"
    assert s.log_level == "INFO"
    assert s.frontend == "console"
    assert s.console_persist is False
    assert s.data_dir == Path(".local/todolist")
    assert s.store_path == Path(".local/todolist") / "store.json"
    assert s.store_slot == "tasks"
    assert s.web_host == "127.0.0.1"
    assert s.web_port == 8000


def test_store_path_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "data"))
    s = Settings.from_env()
    assert s.data_dir == tmp_path / "data"
    assert s.store_path == tmp_path / "data" / "store.json"


def test_explicit_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_FRONTEND", " WEB ")
    monkeypatch.setenv("TODO_CONSOLE_PERSIST", "yes")
    monkeypatch.setenv("TODO_STORE_PATH", str(tmp_path / "elsewhere.json"))
    monkeypatch.setenv("TODO_STORE_SLOT", "mine")
    monkeypatch.setenv("TODO_WEB_PORT", "9001")

    s = Settings.from_env()

    assert s.frontend == "web"
    assert s.console_persist is True
    assert s.store_path == tmp_path / "elsewhere.json"
    assert s.store_slot == "mine"
    assert s.web_port == 9001


def test_invalid_frontend_falls_back_to_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_FRONTEND", "gui")
    assert Settings.from_env().frontend == "console"


@pytest.mark.parametrize("raw", ["eighty", "", "  "])
def test_invalid_port_falls_back_to_8000(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TODO_WEB_PORT", raw)
    assert Settings.from_env().web_port == 8000
