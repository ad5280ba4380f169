# src/task_cli/tasks/task_registry.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from ..core.ports import CollectionStore
from .errors import NotFoundError, ValidationError
from .task_models import Task, TaskPatch, TaskStatus, apply_patch, clean_description, utcnow

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def new_task_id() -> str:
    """Short random token: the first group of a UUID4 (8 hex chars)."""
    return uuid.uuid4().hex[:8]


class TaskRegistry:
    """
    In-memory task collection synchronized to a CollectionStore.

    Every mutation builds the next collection, saves it, and only then swaps it in,
    so a failed save leaves memory and file in agreement (and the StorageError
    propagates to the caller).
    """

    def __init__(
        self,
        store: CollectionStore,
        tasks: list[Task],
        *,
        clock: Clock = utcnow,
        id_factory: IdFactory = new_task_id,
    ) -> None:
        self._store = store
        self._tasks = list(tasks)
        self._clock = clock
        self._id_factory = id_factory

    @classmethod
    def init(
        cls,
        store: CollectionStore,
        *,
        clock: Clock = utcnow,
        id_factory: IdFactory = new_task_id,
    ) -> TaskRegistry:
        tasks = store.load()
        logger.debug("TaskRegistry ready total=%s", len(tasks))
        return cls(store, tasks, clock=clock, id_factory=id_factory)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    def _unique_id(self) -> str:
        taken = {t.id for t in self._tasks}
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
            logger.debug("Task id collision on %s, drawing again.", candidate)

    def _commit(self, tasks: list[Task]) -> None:
        self._store.save(tasks)
        self._tasks = tasks

    # ---- public API ----

    def add(self, description: str | None) -> Task:
        text = clean_description(description)
        now = self._clock()
        task = Task(
            id=self._unique_id(),
            status=TaskStatus.TODO,
            description=text,
            created_at=now,
            updated_at=now,
        )
        self._commit([*self._tasks, task])
        logger.info("Task added id=%s", task.id)
        return task

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index_of(task_id)]

    def update(self, task_id: str, patch: TaskPatch) -> Task:
        """
        Merge `patch` into the task with `task_id`; its position in the collection is kept.

        All edits go through here: description changes and every status transition.
        """
        index = self._index_of(task_id)
        updated = apply_patch(self._tasks[index], patch, now=self._clock())

        tasks = list(self._tasks)
        tasks[index] = updated
        self._commit(tasks)
        logger.info(
            "Task updated id=%s status=%s description_changed=%s",
            task_id,
            updated.status.value,
            patch.description is not None,
        )
        return updated

    def mark(self, task_id: str, status: TaskStatus | str) -> Task:
        return self.update(task_id, TaskPatch(status=TaskStatus.parse(status)))

    def remove(self, task_id: str) -> Task:
        if not task_id:
            raise ValidationError("ID required!")

        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            raise NotFoundError(task_id)

        removed = self._tasks[self._index_of(task_id)]
        self._commit(remaining)
        logger.info("Task removed id=%s", task_id)
        return removed

    def list_tasks(self, status: str | None = None) -> list[Task]:
        """
        Tasks in insertion order, optionally only those whose status equals `status`.

        Unknown status values are not an error: they simply match nothing.
        """
        if not status:
            return list(self._tasks)
        return [t for t in self._tasks if t.status.value == status]
