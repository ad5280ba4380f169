# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, then runs exactly one command against the task file:
- the task registry is loaded only if the command needs it,
- expected errors (TaskError) become a one-line message, never a traceback.
"""

from __future__ import annotations

import logging
import sys

from colorama import just_fix_windows_console

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError
from ..tasks.task_registry import TaskRegistry
from ..tasks.task_store import TaskStore
from .commands import CommandContext, registry
from .view import View

logger = logging.getLogger(__name__)


def build_context(settings, view: View) -> CommandContext:
    """Composition root: wire the JSON store into a lazily loaded registry."""

    def load_registry() -> TaskRegistry:
        return TaskRegistry.init(TaskStore(settings.data_path))

    return CommandContext(
        view=view,
        load_registry=load_registry,
        app_name=getattr(settings, "app_name", "task-cli"),
    )


def main(argv: list[str] | None = None, *, settings=None) -> int:
    """
    Keeping settings injectable makes the CLI easy to test without touching ~/.task-cli.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = getattr(settings, "log_dir", None)
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        # A broken log dir must not stop the task command itself.
        setup_logging(log_dir=None, console_level=console_level)
        logger.warning("File logging disabled (%s): %s", log_dir, e)

    just_fix_windows_console()
    view = View(color=bool(getattr(settings, "color", True)))
    ctx = build_context(settings, view)

    logger.debug("argv=%s data_path=%s", argv, getattr(settings, "data_path", None))

    try:
        return registry.handle(ctx, argv)
    except TaskError as e:
        logger.info("Command %s failed: %s", argv[0] if argv else "", e)
        view.print_error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130
    except Exception:
        # Traceback goes to the log file only; the user gets the one-line message below.
        logger.debug("Command crashed argv=%s", argv, exc_info=True)
        view.print_error("Internal error; see the log file for details.")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
