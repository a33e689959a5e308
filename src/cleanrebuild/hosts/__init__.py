# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bundled host bindings for running outside an IDE."""

from __future__ import annotations

from .build import ProcessRebuildTrigger
from .console import ConsoleLogSink, RichProgressSink
from .solution_file import (
    SolutionFile,
    SolutionFileError,
    SolutionProject,
    discover_solution,
    parse_solution,
)

__all__ = [
    "ConsoleLogSink",
    "ProcessRebuildTrigger",
    "RichProgressSink",
    "SolutionFile",
    "SolutionFileError",
    "SolutionProject",
    "discover_solution",
    "parse_solution",
]
