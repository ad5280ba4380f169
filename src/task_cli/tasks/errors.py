# src/task_cli/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for expected, user-reportable task errors."""


class ValidationError(TaskError):
    """Required input is missing, empty or not one of the allowed values."""


class NotFoundError(TaskError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f'Task ID "{task_id}" not found!')
        self.task_id = task_id


class StorageError(TaskError):
    """
    Reading or writing the task file failed.

    Always raised from the underlying exception, so `__cause__` holds the OS/JSON error.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
