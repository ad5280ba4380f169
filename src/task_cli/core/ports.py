# src/task_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task registry.

The registry depends on a Protocol instead of the concrete JSON store.
This keeps storage swappable and lets tests run against an in-memory store.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class CollectionStore(Protocol):
    """Whole-collection persistence: every save rewrites everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: list[Task]) -> None: ...
