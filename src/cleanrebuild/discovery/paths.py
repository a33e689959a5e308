# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the on-disk root directory of a host project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..interfaces.host import PathCandidate, ProjectHandle
from .enumerator import project_identity

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedProject:
    """Pair a project handle with its root directory, ``None`` when unresolvable."""

    project: ProjectHandle
    root: Path | None


class PathResolver:
    """Determine project root folders across heterogeneous project kinds."""

    def resolve(self, project: ProjectHandle) -> Path | None:
        """Return the root directory of ``project`` or ``None``.

        Path metadata fields are tried in the order the host lists them; a
        field the project kind does not support is skipped. Without any
        usable field the directory holding the project file is used.

        Args:
            project: Host project handle.

        Returns:
            Path | None: Existing directory, or ``None`` when the project has
            no resolvable root (still loading, unsupported kind, missing on
            disk).
        """

        identity = project_identity(project)
        if not identity:
            return None
        candidate = self._first_candidate_value(project)
        try:
            if not candidate:
                reference = Path(identity)
                return reference.parent if reference.is_file() else None
            path = Path(candidate)
            if path.is_dir():
                return path
            return path.parent if path.is_file() else None
        except (OSError, ValueError) as exc:
            LOGGER.debug("unable to inspect path for %s: %s", identity, exc)
            return None

    def resolve_project(self, project: ProjectHandle) -> ResolvedProject:
        """Pair ``project`` with its resolved root directory.

        Args:
            project: Host project handle.

        Returns:
            ResolvedProject: The handle and its root, ``None`` when unresolvable.
        """

        return ResolvedProject(project=project, root=self.resolve(project))

    @staticmethod
    def _first_candidate_value(project: ProjectHandle) -> str | None:
        try:
            candidates: list[PathCandidate] = list(project.path_candidates())
        except Exception as exc:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
            LOGGER.debug("path candidates unavailable: %s", exc)
            return None
        for candidate in candidates:
            try:
                value = candidate.lookup()
            except Exception as exc:  # pylint: disable=broad-exception-caught -- unsupported field
                LOGGER.debug("path field %s unavailable: %s", candidate.field, exc)
                continue
            if isinstance(value, str) and value:
                return value
        return None


__all__ = ["PathResolver", "ResolvedProject"]
