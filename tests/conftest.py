# tests/conftest.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_cli.tasks.task_registry import TaskRegistry
from task_cli.tasks.task_store import TaskStore


class StepClock:
    """Deterministic clock: every call returns a time `step` later than the previous one."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI entrypoint.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's ~/.task-cli and environment.
    """
    return SimpleNamespace(
        app_name="task-cli",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        data_path=tmp_path / "data" / "data.json",
        log_dir=tmp_path / "logs",
        color=False,
    )


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.data_path)


@pytest.fixture()
def registry(store: TaskStore, clock: StepClock) -> TaskRegistry:
    """
    Registry over a real JSON store in tmp_path.

    NOTE: the store stays real because file round-trips are part of what we test.
    """
    return TaskRegistry.init(store, clock=clock)
