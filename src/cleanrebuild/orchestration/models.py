# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Batch-level state and reporting models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from ..clean.models import CleanupResult, ProjectStatus


class OrchestratorState(str, Enum):
    """Phases of a single cleanup invocation."""

    IDLE = "idle"
    ENUMERATING = "enumerating"
    CLEANING = "cleaning"
    REBUILDING = "rebuilding"
    REPORTING = "reporting"


class CleanupMode(str, Enum):
    """Operation requested by the caller."""

    CLEAN_ONLY = "clean-only"
    CLEAN_AND_REBUILD = "clean-and-rebuild"


class EndState(str, Enum):
    """Final outcome summarised to the user."""

    CLEANED_AND_REBUILT = "cleaned-and-rebuilt"
    CLEANED_ONLY = "cleaned-only"
    REBUILD_NOT_STARTED = "rebuild-not-started"


@dataclass(slots=True)
class BatchReport:
    """Aggregate outcome of one cleanup batch."""

    mode: CleanupMode
    targets: tuple[str, ...]
    results: list[CleanupResult] = field(default_factory=list)
    elapsed: float = 0.0
    rebuild_started: bool | None = None

    @property
    def total(self) -> int:
        """Return the number of enumerated projects."""

        return len(self.results)

    @property
    def attempted(self) -> int:
        """Return the number of projects with a resolvable root."""

        return sum(1 for result in self.results if result.status is not ProjectStatus.SKIPPED)

    @property
    def succeeded(self) -> int:
        """Return the number of projects cleaned without error."""

        return len(self._with_status(ProjectStatus.CLEANED))

    @property
    def failures(self) -> list[CleanupResult]:
        """Return results of projects whose cleanup failed."""

        return self._with_status(ProjectStatus.FAILED)

    @property
    def skipped(self) -> list[CleanupResult]:
        """Return results of projects without a resolvable root."""

        return self._with_status(ProjectStatus.SKIPPED)

    @property
    def rebuild_requested(self) -> bool:
        """Return ``True`` when the batch was started as clean-and-rebuild."""

        return self.mode is CleanupMode.CLEAN_AND_REBUILD

    @property
    def success(self) -> bool:
        """Return ``False`` only when a requested rebuild could not be started."""

        return not self.rebuild_requested or bool(self.rebuild_started)

    @property
    def end_state(self) -> EndState:
        """Classify the batch for its closing summary.

        Returns:
            EndState: ``cleaned-only`` without a rebuild request, otherwise
            whether the rebuild could be started.
        """

        if not self.rebuild_requested:
            return EndState.CLEANED_ONLY
        return EndState.CLEANED_AND_REBUILT if self.rebuild_started else EndState.REBUILD_NOT_STARTED

    @property
    def summary(self) -> str:
        """Return the closing message for the batch."""

        cleaned = f"Cleaned {describe_targets(self.targets)}"
        state = self.end_state
        if state is EndState.CLEANED_AND_REBUILT:
            return f"{cleaned} and rebuilt the solution."
        if state is EndState.REBUILD_NOT_STARTED:
            return f"{cleaned}. Unable to rebuild the solution."
        return f"{cleaned}."

    def _with_status(self, status: ProjectStatus) -> list[CleanupResult]:
        return [result for result in self.results if result.status is status]


def describe_targets(targets: Sequence[str]) -> str:
    """Render target names for messages, e.g. ``bin and obj folders``."""

    if not targets:
        return "no folders"
    if len(targets) == 1:
        return f"{targets[0]} folders"
    return f"{', '.join(targets[:-1])} and {targets[-1]} folders"


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``mm:ss.ffff``."""

    ticks = round(max(seconds, 0.0) * 10_000)
    minutes, remainder = divmod(ticks, 60 * 10_000)
    whole, fraction = divmod(remainder, 10_000)
    return f"{minutes:02d}:{whole:02d}.{fraction:04d}"


__all__ = [
    "BatchReport",
    "CleanupMode",
    "EndState",
    "OrchestratorState",
    "describe_targets",
    "format_elapsed",
]
