# src/task_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is created on disk at import time.
- Entrypoints accept an injected settings object so tests never touch ~/.task-cli.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_DATA_DIR = Path("~/.task-cli")
DEFAULT_DATA_FILE = "data.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default.expanduser()
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    data_path: Path
    log_dir: Path

    # ---- Presentation ----
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-cli").strip() or "task-cli"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        data_dir = _env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR)
        data_path = _env_path(_k("DATA_PATH"), data_dir / DEFAULT_DATA_FILE)
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        # https://no-color.org: presence of NO_COLOR (any value) disables color.
        no_color = os.getenv("NO_COLOR") is not None
        color = _env_bool(_k("COLOR"), not no_color)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            data_path=data_path,
            log_dir=log_dir,
            color=color,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
