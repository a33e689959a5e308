# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal implementations of the progress and log sinks."""

from __future__ import annotations

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn, TimeElapsedColumn
from rich.text import Text


class RichProgressSink:
    """Render batch progress as a transient Rich progress bar.

    A ``None`` console turns the sink into a no-op, used when no terminal is
    available to draw on.
    """

    def __init__(self, console: Console | None) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def set_total(self, total: int) -> None:
        if self._console is None:
            return
        self.clear()
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._task_id = self._progress.add_task("Cleaning", total=total)
        self._progress.start()

    def set_current(self, index: int, label: str) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, completed=index, description=label)

    def clear(self) -> None:
        if self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task_id = None


class ConsoleLogSink:
    """Print log lines to a Rich console and keep them for later inspection."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self.lines: list[str] = []

    def write_line(self, message: str) -> None:
        self.lines.append(message)
        self._console.print(Text(message), highlight=False)

    def clear(self) -> None:
        self.lines.clear()


__all__ = ["ConsoleLogSink", "RichProgressSink"]
