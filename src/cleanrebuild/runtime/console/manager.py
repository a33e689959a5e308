# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Consoles for report output on stdout and the progress bar on stderr."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache
from typing import Literal, TextIO

from rich.console import Console

Stream = Literal["stdout", "stderr"]


def detect_tty(stream: Stream = "stdout") -> bool:
    """Return ``True`` when ``stream`` is attached to a terminal."""

    target: TextIO | None = sys.stderr if stream == "stderr" else sys.stdout
    try:
        return bool(target is not None and target.isatty())
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleProfile:
    """Display preferences for one console; ``tty`` is sampled per lookup."""

    stream: Stream
    color: bool
    emoji: bool
    tty: bool

    def build(self) -> Console:
        styled = self.color and self.tty
        return Console(
            stderr=self.stream == "stderr",
            color_system="auto" if styled else None,
            force_terminal=self.tty,
            no_color=not styled,
            emoji=self.emoji,
            soft_wrap=True,
            highlight=False,
        )


class RichConsoleManager:
    """Cache one console per stream and display preference.

    Report lines and the log pane go to stdout so they can be piped; the
    transient progress bar is drawn on stderr and only when stderr is a
    terminal.
    """

    def __init__(self) -> None:
        self._cache: dict[ConsoleProfile, Console] = {}

    def get(self, *, color: bool, emoji: bool, stream: Stream = "stdout") -> Console:
        """Return the console for ``stream`` with the given preferences.

        Args:
            color: ``True`` when ANSI styling may be used on a terminal.
            emoji: ``True`` when Rich should render emoji glyphs.
            stream: Output stream the console writes to.

        Returns:
            Console: Cached console for the profile.
        """

        profile = ConsoleProfile(stream=stream, color=color, emoji=emoji, tty=detect_tty(stream))
        console = self._cache.get(profile)
        if console is None:
            console = self._cache[profile] = profile.build()
        return console

    def progress_console(self, *, color: bool) -> Console | None:
        """Return the stderr console for progress rendering, ``None`` off a terminal."""

        if not detect_tty("stderr"):
            return None
        return self.get(color=color, emoji=False, stream="stderr")


@cache
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager` instance."""

    return RichConsoleManager()


__all__ = ["ConsoleProfile", "RichConsoleManager", "Stream", "detect_tty", "get_console_manager"]
