# src/task_cli/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task-cli.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal readable for a one-shot CLI:
    - allow task_cli logs (the handler level decides how much)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "task_cli" or name.startswith("task_cli."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


class _ConsoleFormatter(logging.Formatter):
    """Single-line records on the terminal; tracebacks only go to the log file."""

    def format(self, record: logging.LogRecord) -> str:
        exc_info, exc_text, stack_info = record.exc_info, record.exc_text, record.stack_info
        record.exc_info = record.exc_text = record.stack_info = None
        try:
            return super().format(record)
        finally:
            record.exc_info, record.exc_text, record.stack_info = exc_info, exc_text, stack_info


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, WARNING+ by default so command output stays clean
    - File handler: full logs for debugging (skipped when log_dir is None)

    Call this ONCE, very early (before first logger.info).
    Returns the log file path, or None if file logging is disabled.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(_ConsoleFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file
