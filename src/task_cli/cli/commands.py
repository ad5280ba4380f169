# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..tasks.errors import ValidationError
from ..tasks.task_models import TaskPatch, TaskStatus
from ..tasks.task_registry import TaskRegistry
from .view import View

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """
    What a command handler gets to work with.

    The task registry is loaded on first access, so commands that never touch
    tasks (help) never read or create the data file.
    """

    view: View
    load_registry: Callable[[], TaskRegistry]
    app_name: str = "task-cli"
    _registry: TaskRegistry | None = field(default=None, repr=False)

    @property
    def tasks(self) -> TaskRegistry:
        if self._registry is None:
            self._registry = self.load_registry()
        return self._registry


CommandHandler = Callable[[CommandContext, list[str]], None]


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    help_text: str
    usage: str
    aliases: tuple[str, ...]


class CommandRegistry:
    """Name/alias -> handler table for the `task-cli <command> [args]` surface."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        usage: str = "",
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._commands[key] = _Command(
            name=key,
            help_text=help_text,
            usage=usage,
            aliases=tuple(a.lower() for a in aliases),
        )
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def resolve(self, name: str) -> CommandHandler | None:
        return self._handlers.get(name.lower())

    def handle(self, ctx: CommandContext, argv: list[str]) -> int:
        """
        Dispatch argv (without the program name). Returns the process exit code.

        TaskError from handlers is NOT caught here; the entrypoint reports it.
        """
        if not argv:
            ctx.view.print_help(self.build_help(ctx.app_name))
            return 0

        name, args = argv[0], argv[1:]
        handler = self.resolve(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            ctx.view.print_error(f'Command not found: "{name}"')
            ctx.view.print_help(self.build_help(ctx.app_name))
            return 1

        handler(ctx, args)
        return 0

    def build_help(self, app_name: str = "task-cli") -> str:
        rows: list[tuple[str, str]] = []
        for cmd in self._commands.values():
            names = ", ".join((cmd.name, *cmd.aliases))
            left = f"{names} {cmd.usage}".rstrip()
            rows.append((left, cmd.help_text))

        width = max((len(left) for left, _ in rows), default=0) + 2
        lines = [f"Usage: {app_name} <command> [argument]", "", "Commands:"]
        for left, help_text in rows:
            lines.append(f"  {left.ljust(width)}{help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require_id(args: list[str]) -> str:
    if not args or not args[0].strip():
        raise ValidationError("ID required!")
    return args[0].strip()


def cmd_help(ctx: CommandContext, args: list[str]) -> None:
    ctx.view.print_help(registry.build_help(ctx.app_name))


def cmd_add(ctx: CommandContext, args: list[str]) -> None:
    task = ctx.tasks.add(" ".join(args))
    ctx.view.print_success(f"Task added! (ID: {task.id})")


def cmd_list(ctx: CommandContext, args: list[str]) -> None:
    status = args[0] if args else None
    ctx.view.print_list(ctx.tasks.list_tasks(status))


def cmd_update(ctx: CommandContext, args: list[str]) -> None:
    task_id = args[0].strip() if args else ""
    description = " ".join(args[1:]).strip()
    if not task_id or not description:
        raise ValidationError("ID and description required!")
    ctx.tasks.update(task_id, TaskPatch(description=description))
    ctx.view.print_success("Task updated!")


def cmd_remove(ctx: CommandContext, args: list[str]) -> None:
    task_id = _require_id(args)
    ctx.tasks.remove(task_id)
    ctx.view.print_success("Task removed!")


def _mark_command(status: TaskStatus, message: str) -> CommandHandler:
    def handler(ctx: CommandContext, args: list[str]) -> None:
        task_id = _require_id(args)
        ctx.tasks.mark(task_id, status)
        ctx.view.print_success(message)

    handler.__name__ = f"cmd_mark_{status.name.lower()}"
    return handler


cmd_mark_done = _mark_command(TaskStatus.DONE, "Task marked as done.")
cmd_mark_todo = _mark_command(TaskStatus.TODO, "Task marked as to do.")
cmd_mark_in_progress = _mark_command(TaskStatus.IN_PROGRESS, "Task marked as in progress.")


registry.register("add", cmd_add, help_text="Add new task", aliases=["a"], usage="<description>")
registry.register(
    "list",
    cmd_list,
    help_text="List tasks  (todo, done, in-progress)",
    aliases=["l"],
    usage="[filter]",
)
registry.register(
    "update", cmd_update, help_text="Update description", aliases=["u"], usage="<id> <description>"
)
registry.register("remove", cmd_remove, help_text="Remove task", aliases=["r"], usage="<id>")
registry.register(
    "mark-done", cmd_mark_done, help_text="Mark as completed", aliases=["md"], usage="<id>"
)
registry.register(
    "mark-todo", cmd_mark_todo, help_text="Mark as pending", aliases=["mt"], usage="<id>"
)
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    help_text="Mark as in progress",
    aliases=["mi"],
    usage="<id>",
)
registry.register("help", cmd_help, help_text="Show this help", aliases=["h"])
