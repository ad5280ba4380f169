# src/task_cli/cli/view.py

"""Terminal rendering: task lists, help text, success/error lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from colorama import Fore, Style

from ..tasks.task_models import Task, TaskStatus

STATUS_ICONS = {
    TaskStatus.DONE: "✅",
    TaskStatus.IN_PROGRESS: "🕐",
    TaskStatus.TODO: "❌",
}
UNKNOWN_ICON = "❓"

DATE_FORMAT = "%d/%m/%Y"


def format_date(dt: datetime) -> str:
    return dt.astimezone().strftime(DATE_FORMAT)


def status_icon(status: str) -> str:
    try:
        return STATUS_ICONS[TaskStatus(status)]
    except ValueError:
        return UNKNOWN_ICON


class View:
    def __init__(
        self,
        *,
        color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.color = color
        self._out = out
        self._err = err

    # Resolved lazily so pytest's capsys (which swaps sys.stdout) sees the output.
    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _c(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{Style.RESET_ALL}"

    def format_task(self, task: Task) -> str:
        created = format_date(task.created_at)
        updated = (
            "" if task.updated_at == task.created_at
            else f"(Updated at: {format_date(task.updated_at)})"
        )
        header = f"{created} {updated}".rstrip()
        return (
            f"{status_icon(task.status)}{self._c(Style.DIM, f' [{task.id}]')} "
            f"{self._c(Fore.BLUE, header)}\n"
            f"   {task.description}\n"
        )

    def print_list(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        if not tasks:
            print("No tasks found!", file=self.out)
            return
        for task in tasks:
            print(self.format_task(task), file=self.out)

    def print_help(self, text: str) -> None:
        print(text, file=self.out)

    def print_success(self, msg: str) -> None:
        print(self._c(Fore.GREEN, msg), file=self.out)

    def print_error(self, msg: str) -> None:
        print(self._c(Fore.RED, f"Error: {msg}"), file=self.err)
