# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_cli.config import Settings, get_settings

ALL_VARS = (
    "TASK_CLI_APP_NAME",
    "TASK_CLI_LOG_LEVEL",
    "TASK_CLI_DATA_DIR",
    "TASK_CLI_DATA_PATH",
    "TASK_CLI_LOG_DIR",
    "TASK_CLI_COLOR",
    "NO_COLOR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    for name in ALL_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return monkeypatch


def test_defaults_point_into_home(clean_env, tmp_path: Path) -> None:
    s = Settings.from_env()
    assert s.app_name == "task-cli"
    assert s.log_level == "WARNING"
    assert s.data_dir == tmp_path / ".task-cli"
    assert s.data_path == tmp_path / ".task-cli" / "data.json"
    assert s.log_dir == s.data_dir
    assert s.color is True


def test_data_dir_override_moves_derived_paths(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_CLI_DATA_DIR", str(tmp_path / "elsewhere"))
    s = Settings.from_env()
    assert s.data_path == tmp_path / "elsewhere" / "data.json"
    assert s.log_dir == tmp_path / "elsewhere"


def test_explicit_paths_and_tilde_expansion(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_CLI_DATA_PATH", "~/tasks/mine.json")
    clean_env.setenv("TASK_CLI_LOG_DIR", str(tmp_path / "logs"))
    clean_env.setenv("TASK_CLI_LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.data_path == tmp_path / "tasks" / "mine.json"
    assert s.log_dir == tmp_path / "logs"
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize(
    "env, expected",
    [
        ({}, True),
        ({"NO_COLOR": "1"}, False),
        ({"NO_COLOR": ""}, False),
        ({"TASK_CLI_COLOR": "off"}, False),
        ({"TASK_CLI_COLOR": "yes", "NO_COLOR": "1"}, True),
        ({"TASK_CLI_COLOR": "maybe"}, True),
    ],
)
def test_color_switches(clean_env, env: dict[str, str], expected: bool) -> None:
    for name, value in env.items():
        clean_env.setenv(name, value)
    assert Settings.from_env().color is expected


def test_settings_are_frozen_and_shared() -> None:
    s = get_settings()
    assert s is get_settings()
    with pytest.raises(AttributeError):
        s.app_name = "other"  # type: ignore[misc]
