# src/todolist/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.errors import (
    EmptyInputError,
    InvalidIdError,
    MissingArgumentError,
    TaskListError,
    UnknownCommandError,
)
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_store import list_tasks

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

# ASCII digits only: int() alone would also take "1_0", "+1" and non-ASCII digits.
_TASK_ID_RE = re.compile(r"-?\d+", re.ASCII)


class CommandRegistry:
    """Console command registry (add, list, done, help, quit)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle one input line like "done 3".
        Returns the reply text, or None for a blank line.

        Task list errors come back as a single "Error: ..." line; the command
        keyword is case-insensitive, arguments are whitespace separated.
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownCommandError(name)
            return handler(state, args)
        except TaskListError as e:
            logger.debug("Command %s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["Available commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(args: list[str]) -> int:
    token = " ".join(args).strip()
    if not token:
        raise MissingArgumentError("Please provide a task ID. Use: done <id>")
    if not _TASK_ID_RE.fullmatch(token):
        raise InvalidIdError(token)
    return int(token)


def cmd_add(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    if not text:
        raise EmptyInputError("Task text cannot be empty. Use: add <task text>")
    task = task_api.add(state, text)
    return f"Task {task.id} added successfully!"


def cmd_list(state: AppState, args: list[str]) -> str:
    return "\n".join(list_tasks(state.tasks))


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = parse_task_id(args)
    task_api.complete(state, task_id)
    return f"Task {task_id} marked as done!"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_quit(state: AppState, args: list[str]) -> str:
    state.running = False
    return "Goodbye!"


registry.register("add", cmd_add, help_text="Add a new task", usage="add <task text>")
registry.register("list", cmd_list, help_text="Show all tasks")
registry.register("done", cmd_done, help_text="Mark a task as completed", usage="done <id>")
registry.register("help", cmd_help, help_text="Show this help message", aliases=["h", "?"])
registry.register("quit", cmd_quit, help_text="Exit the application", aliases=["exit"])
