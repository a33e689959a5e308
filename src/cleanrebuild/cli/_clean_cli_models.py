# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared option declarations for the clean and rebuild commands."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

SOLUTION_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Solution file, or a directory containing exactly one .sln file."),
]
PROJECT_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--project",
        "-p",
        help="Only clean this project (unique or display name, repeatable).",
    ),
]
TARGET_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--target",
        "-t",
        help="Subdirectory to empty in each project (repeatable, overrides configuration).",
    ),
]
COMMAND_OPTION = Annotated[
    str | None,
    typer.Option(
        "--command",
        help="Rebuild command line; '{solution}' is replaced by the solution path.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Write diagnostic logging to stderr."),
]


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return sanitized CLI values preserving order."""

    if not values:
        return ()
    cleaned_values: list[str] = []
    for entry in values:
        stripped = entry.strip() if entry else ""
        if stripped:
            cleaned_values.append(stripped)
    return tuple(cleaned_values)


@dataclass(slots=True)
class CleanCLIOptions:
    """Capture CLI overrides supplied to the clean and rebuild commands."""

    solution: Path
    projects: tuple[str, ...]
    targets: tuple[str, ...]
    emoji: bool
    debug: bool
    command: str | None = None


def build_clean_options(
    solution: Path,
    project: Sequence[str] | None,
    target: Sequence[str] | None,
    *,
    emoji: bool,
    debug: bool,
    command: str | None = None,
) -> CleanCLIOptions:
    """Construct ``CleanCLIOptions`` from Typer callback parameters."""

    return CleanCLIOptions(
        solution=solution,
        projects=normalize_cli_values(project),
        targets=normalize_cli_values(target),
        emoji=emoji,
        debug=debug,
        command=command.strip() if command and command.strip() else None,
    )


__all__ = [
    "COMMAND_OPTION",
    "CleanCLIOptions",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "PROJECT_OPTION",
    "SOLUTION_ARGUMENT",
    "TARGET_OPTION",
    "build_clean_options",
    "normalize_cli_values",
]
