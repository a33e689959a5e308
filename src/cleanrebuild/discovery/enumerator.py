# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Flatten a solution's project graph into an ordered list of leaf projects."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Final

from ..interfaces.host import ProjectHandle, ProjectKind, SolutionSource

LOGGER = logging.getLogger(__name__)

MAX_NESTING_DEPTH: Final[int] = 64


def project_identity(project: ProjectHandle) -> str:
    """Return the project file reference, or ``""`` when it cannot be read."""

    try:
        return project.file_reference_path() or ""
    except Exception as exc:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
        LOGGER.debug("project identity unavailable: %s", exc)
        return ""


def project_name(project: ProjectHandle) -> str:
    """Return the project's unique name, or ``""`` when it cannot be read."""

    try:
        return project.unique_name() or ""
    except Exception as exc:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
        LOGGER.debug("project name unavailable: %s", exc)
        return ""


class ProjectEnumerator:
    """Produce the deduplicated, name-ordered leaf projects of a solution."""

    def enumerate(
        self,
        solution: SolutionSource,
        selected: Sequence[ProjectHandle] | None = None,
    ) -> list[ProjectHandle]:
        """Return the leaf projects to operate on.

        A non-empty selection seeds the traversal; otherwise every top-level
        project does. Solution folders are replaced by their descendants,
        unloaded branches contribute nothing, and the seeds themselves are
        kept so a directly selected project is never lost.

        Args:
            solution: Host solution to enumerate.
            selected: Explicit selection overriding the host's own.

        Returns:
            list[ProjectHandle]: Projects sorted by unique name, each name
            appearing once.
        """

        starting = list(selected) if selected else self._starting_projects(solution)
        # values keep handles alive so their ids stay unique during the traversal
        visited: dict[int, ProjectHandle] = {}
        discovered: list[ProjectHandle] = []
        for project in starting:
            discovered.extend(self._expand(project, visited, 0))
        return _ordered_leaves([*discovered, *starting])

    @staticmethod
    def _starting_projects(solution: SolutionSource) -> list[ProjectHandle]:
        try:
            chosen = solution.list_selected_projects()
        except Exception as exc:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
            LOGGER.debug("active selection unavailable: %s", exc)
            chosen = None
        if chosen:
            return list(chosen)
        try:
            return list(solution.list_top_level_projects())
        except Exception as exc:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
            LOGGER.debug("solution projects unavailable: %s", exc)
            return []

    def _expand(self, project: ProjectHandle, visited: dict[int, ProjectHandle], depth: int) -> list[ProjectHandle]:
        """Depth-first expansion guarded against cycles and broken nodes."""

        marker = id(project)
        if marker in visited:
            return []
        if depth > MAX_NESTING_DEPTH:
            LOGGER.debug("project nesting deeper than %s levels ignored", MAX_NESTING_DEPTH)
            return []
        visited[marker] = project
        try:
            kind = project.kind()
            if kind is not ProjectKind.FOLDER and project.file_reference_path():
                return [project]
            children = list(project.children())
        except Exception as exc:  # pylint: disable=broad-exception-caught -- unloaded or inaccessible node
            LOGGER.debug("skipping inaccessible project node: %s", exc)
            return []
        leaves: list[ProjectHandle] = []
        for child in children:
            if child is None:
                continue
            leaves.extend(self._expand(child, visited, depth + 1))
        return leaves


def _is_leaf(project: ProjectHandle) -> bool:
    try:
        if project.kind() is ProjectKind.FOLDER:
            return False
    except Exception:  # pylint: disable=broad-exception-caught -- host bindings raise arbitrary errors
        return False
    return bool(project_identity(project))


def _ordered_leaves(projects: Iterable[ProjectHandle]) -> list[ProjectHandle]:
    by_name: dict[str, ProjectHandle] = {}
    for project in projects:
        if not _is_leaf(project):
            continue
        name = project_name(project)
        if name and name not in by_name:
            by_name[name] = project
    return [by_name[name] for name in sorted(by_name)]


__all__ = ["ProjectEnumerator", "project_identity", "project_name"]
