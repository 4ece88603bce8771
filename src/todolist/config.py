# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every variable has a default.
- Local overrides live in an uncommitted config_local.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

FRONTENDS = ("console", "web")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Front end ----
    frontend: str
    console_persist: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_path: Path
    store_slot: str

    # ---- Web page ----
    web_host: str
    web_port: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todolist").strip() or "todolist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        frontend = _env_choice(_k("FRONTEND"), FRONTENDS, "console")
        console_persist = _env_bool(_k("CONSOLE_PERSIST"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todolist"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "store.json")
        store_slot = _env(_k("STORE_SLOT"), "tasks").strip() or "tasks"

        web_host = _env(_k("WEB_HOST"), "127.0.0.1").strip() or "127.0.0.1"
        web_port = _env_int(_k("WEB_PORT"), 8000)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            frontend=frontend,
            console_persist=console_persist,
            data_dir=data_dir,
            store_path=store_path,
            store_slot=store_slot,
            web_host=web_host,
            web_port=web_port,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore

    if hasattr(_config_local, "FRONTEND") and _config_local.FRONTEND in FRONTENDS:
        object.__setattr__(SETTINGS, "frontend", str(_config_local.FRONTEND))  # type: ignore[misc]
    if hasattr(_config_local, "CONSOLE_PERSIST"):
        object.__setattr__(SETTINGS, "console_persist", bool(_config_local.CONSOLE_PERSIST))  # type: ignore[misc]
except Exception:
    pass


def get_settings() -> Settings:
    return SETTINGS
