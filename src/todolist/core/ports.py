# src/todolist/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and I/O swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

LineSource = Callable[[str], str]
# input()-compatible: takes a prompt, returns one line, raises EOFError at end of input.

OutputSink = Callable[[str], None]


class KeyValueStore(Protocol):
    """Get/set persistence primitive: one string value per named slot."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
