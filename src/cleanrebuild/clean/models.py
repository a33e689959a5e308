# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Outcome records produced while cleaning project directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TargetStatus(str, Enum):
    """Outcome of processing one target subdirectory."""

    CLEANED = "cleaned"
    MISSING = "missing"
    FAILED = "failed"


class ProjectStatus(str, Enum):
    """Outcome of processing one project."""

    CLEANED = "cleaned"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class TargetOutcome:
    """Describe what happened to ``<root>/<name>``."""

    name: str
    path: Path
    status: TargetStatus
    removed: int = 0
    message: str | None = None

    @property
    def failed(self) -> bool:
        """Return ``True`` when this target could not be cleaned."""

        return self.status is TargetStatus.FAILED


@dataclass(slots=True)
class CleanupResult:
    """Capture the outcome of cleaning a single project."""

    project: str
    path: Path | None
    status: ProjectStatus
    outcomes: list[TargetOutcome] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def skipped(cls, project: str) -> CleanupResult:
        """Return the result for a project without a resolvable root."""

        return cls(project=project, path=None, status=ProjectStatus.SKIPPED, message="no project directory found")

    @classmethod
    def failed(cls, project: str, path: Path, message: str) -> CleanupResult:
        """Return the result for a project whose cleanup raised unexpectedly.

        Args:
            project: Unique project name.
            path: Project root that was being cleaned.
            message: Description of the error.

        Returns:
            CleanupResult: A ``failed`` result without target outcomes.
        """

        return cls(project=project, path=path, status=ProjectStatus.FAILED, message=message)

    @classmethod
    def from_outcomes(cls, project: str, root: Path, outcomes: list[TargetOutcome]) -> CleanupResult:
        """Fold target outcomes into a project result.

        Args:
            project: Unique project name.
            root: Resolved project root.
            outcomes: Outcomes returned by the directory cleaner.

        Returns:
            CleanupResult: ``failed`` when any target failed, ``cleaned`` otherwise.
        """

        failure = next((outcome for outcome in outcomes if outcome.failed), None)
        if failure is None:
            return cls(project=project, path=root, status=ProjectStatus.CLEANED, outcomes=outcomes)
        return cls(
            project=project,
            path=failure.path,
            status=ProjectStatus.FAILED,
            outcomes=outcomes,
            message=failure.message,
        )

    @property
    def removed(self) -> int:
        """Return the number of entries removed across all targets."""

        return sum(outcome.removed for outcome in self.outcomes)


__all__ = [
    "CleanupResult",
    "ProjectStatus",
    "TargetOutcome",
    "TargetStatus",
]
