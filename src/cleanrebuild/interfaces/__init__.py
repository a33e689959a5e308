# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators the cleanup engine consumes."""

from __future__ import annotations

from .config import ConfigSource
from .host import (
    LogSink,
    PathCandidate,
    ProgressSink,
    ProjectHandle,
    ProjectKind,
    RebuildTrigger,
    SolutionSource,
)

__all__ = [
    "ConfigSource",
    "LogSink",
    "PathCandidate",
    "ProgressSink",
    "ProjectHandle",
    "ProjectKind",
    "RebuildTrigger",
    "SolutionSource",
]
