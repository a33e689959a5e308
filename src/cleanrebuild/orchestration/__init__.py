# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Batch orchestration for solution cleanup."""

from __future__ import annotations

from .models import BatchReport, CleanupMode, EndState, OrchestratorState, describe_targets, format_elapsed
from .orchestrator import CleanupOrchestrator, timestamp

__all__ = [
    "BatchReport",
    "CleanupMode",
    "CleanupOrchestrator",
    "EndState",
    "OrchestratorState",
    "describe_targets",
    "format_elapsed",
    "timestamp",
]
