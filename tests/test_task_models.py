# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from task_cli.tasks.errors import ValidationError
from task_cli.tasks.task_models import Task, TaskPatch, TaskStatus, apply_patch

T0 = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)


def _task(**overrides) -> Task:
    fields = dict(
        id="abc12345",
        status=TaskStatus.TODO,
        description="Write report",
        created_at=T0,
        updated_at=T0,
    )
    fields.update(overrides)
    return Task(**fields)


def test_status_values_match_data_file() -> None:
    assert [s.value for s in TaskStatus] == ["todo", "in-progress", "done"]
    assert TaskStatus.parse("in-progress") is TaskStatus.IN_PROGRESS


def test_status_parse_rejects_unknown() -> None:
    with pytest.raises(ValidationError, match="Invalid status"):
        TaskStatus.parse("finished")


def test_apply_patch_merges_only_given_fields() -> None:
    task = _task()
    later = T0 + timedelta(minutes=5)

    done = apply_patch(task, TaskPatch(status=TaskStatus.DONE), now=later)
    assert done.status is TaskStatus.DONE
    assert done.description == task.description
    assert done.id == task.id
    assert done.created_at == task.created_at
    assert done.updated_at == later

    renamed = apply_patch(done, TaskPatch(description="  Write final report "), now=later)
    assert renamed.description == "Write final report"
    assert renamed.status is TaskStatus.DONE


def test_apply_patch_accepts_plain_status_string() -> None:
    patched = apply_patch(_task(), TaskPatch(status="done"), now=T0)  # type: ignore[arg-type]
    assert patched.status is TaskStatus.DONE


def test_apply_patch_rejects_empty_patch_and_blank_description() -> None:
    with pytest.raises(ValidationError):
        apply_patch(_task(), TaskPatch(), now=T0)
    with pytest.raises(ValidationError, match="Description is required"):
        apply_patch(_task(), TaskPatch(description="   "), now=T0)


def test_apply_patch_never_moves_updated_at_backwards() -> None:
    task = _task(updated_at=T0 + timedelta(hours=1))
    patched = apply_patch(task, TaskPatch(status=TaskStatus.DONE), now=T0)
    assert patched.updated_at == task.updated_at
    assert patched.updated_at >= patched.created_at


def test_task_dict_uses_camel_case_keys() -> None:
    task = _task(status=TaskStatus.IN_PROGRESS, updated_at=T0 + timedelta(seconds=3))
    raw = task.to_dict()
    assert raw == {
        "id": "abc12345",
        "status": "in-progress",
        "description": "Write report",
        "createdAt": "2024-03-01T09:30:00+00:00",
        "updatedAt": "2024-03-01T09:30:03+00:00",
    }
    assert Task.from_dict(raw) == task


def test_from_dict_reads_naive_and_z_suffixed_timestamps_as_utc() -> None:
    task = Task.from_dict(
        {
            "id": "x1",
            "status": "todo",
            "description": "d",
            "createdAt": "2024-03-01T09:30:00.000Z",
            "updatedAt": "2024-03-01T09:30:00",
        }
    )
    assert task.created_at == T0
    assert task.updated_at == T0


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "an", "object"],
        {"id": "x", "status": "todo", "description": "d", "createdAt": "2024-01-01"},
        {"id": "x", "status": "later", "description": "d", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        {"id": "x", "status": "todo", "description": "", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        {"id": "x", "status": "todo", "description": "d", "createdAt": 1700000000, "updatedAt": "2024-01-01"},
    ],
)
def test_from_dict_rejects_malformed_records(raw) -> None:
    with pytest.raises((ValueError, KeyError, TypeError)):
        Task.from_dict(raw)
