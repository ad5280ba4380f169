# src/task_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from .errors import ValidationError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Any status may move to any other; new tasks always start as TODO.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | TaskStatus) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(f'Invalid status "{raw}" (expected one of: {allowed})') from None


def utcnow() -> datetime:
    return datetime.now(UTC)


def _parse_ts(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be an ISO-8601 string, got {type(raw).__name__}")
    dt = datetime.fromisoformat(raw)
    # Naive timestamps are treated as UTC.
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    status: TaskStatus
    description: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, str]:
        """JSON record, using the camelCase keys of the data file."""
        return {
            "id": self.id,
            "status": self.status.value,
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from a data-file record.

        Raises ValueError/KeyError/TypeError on malformed records; the store turns
        those into StorageError.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        description = raw["description"]
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(description, str) or not description.strip():
            raise ValueError(f"task {task_id}: description must be a non-empty string")

        return cls(
            id=task_id,
            status=TaskStatus(raw["status"]),
            description=description,
            created_at=_parse_ts(raw["createdAt"]),
            updated_at=_parse_ts(raw["updatedAt"]),
        )


@dataclass(frozen=True, slots=True)
class TaskPatch:
    """Partial update: only the mutable fields; None means "leave unchanged"."""

    status: TaskStatus | None = None
    description: str | None = None

    def is_empty(self) -> bool:
        return self.status is None and self.description is None


def clean_description(description: str | None) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationError("Description is required!")
    return text


def apply_patch(task: Task, patch: TaskPatch, *, now: datetime) -> Task:
    """
    Return a copy of `task` with `patch` merged in and `updated_at` refreshed.

    id and created_at are never touched. updated_at never moves backwards,
    even if the wall clock does.
    """
    if patch.is_empty():
        raise ValidationError("Nothing to update: give a new status or description.")

    status = task.status if patch.status is None else TaskStatus.parse(patch.status)
    description = (
        task.description if patch.description is None else clean_description(patch.description)
    )

    return replace(
        task,
        status=status,
        description=description,
        updated_at=max(now, task.updated_at),
    )
