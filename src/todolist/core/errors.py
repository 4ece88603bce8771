# src/todolist/core/errors.py

"""
Error taxonomy.

None of these are fatal: front ends catch TaskListError and report the message
as a single line of text (console) or as an HTTP error detail (web page).
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for user-facing task list errors."""


class EmptyInputError(TaskListError, ValueError):
    """Task text is empty after trimming."""


class MissingArgumentError(TaskListError, ValueError):
    """A command was given without its required argument."""


class InvalidIdError(TaskListError, ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f'"{token}" is not a valid task ID. Please use a number.')
        self.token = token


class TaskNotFoundError(TaskListError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class UnknownCommandError(TaskListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown command: "{name}". Type "help" for available commands.')
        self.name = name


class StorageCorruptError(TaskListError):
    """Persisted task data could not be parsed."""
