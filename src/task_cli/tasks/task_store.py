# src/task_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .errors import StorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole collection lives in one pretty-printed JSON array:
    - load() reads everything (and bootstraps an empty file if missing)
    - save() rewrites everything via a temp file + os.replace

    Not safe for concurrent writers; the last save wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _ensure_dir(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def _decode(self, text: str) -> list[Task]:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array of tasks, got {type(data).__name__}")
        tasks = [Task.from_dict(item) for item in data]
        seen: set[str] = set()
        for t in tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)
        return tasks

    # ---- public API ----

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("No task file at %s, creating an empty one.", self._path)
            self.save([])
            return []
        except OSError as e:
            raise StorageError(
                f"Failed to read task file {self._path}: {e}", path=self._path
            ) from e

        try:
            tasks = self._decode(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, KeyError, TypeError) as e:
            raise StorageError(
                f"Task file {self._path} is corrupt: {e}", path=self._path
            ) from e

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
            self._ensure_dir()
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(
                f"Failed to save tasks to {self._path}: {e}", path=self._path
            ) from e

        logger.debug("Saved %d task(s) to %s", len(tasks), self._path)
