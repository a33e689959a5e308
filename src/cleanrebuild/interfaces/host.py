# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host-side capabilities consumed by the cleanup engine.

The engine never talks to an IDE or build system directly. Hosts supply a
:class:`SolutionSource` whose :class:`ProjectHandle` nodes are treated as a
foreign, read-only graph: every query may raise, children may form cycles,
and path metadata differs between project kinds.
"""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import NamedTuple, Protocol, runtime_checkable


class ProjectKind(str, Enum):
    """Discriminate organisational grouping nodes from real projects."""

    FOLDER = "folder"
    LEAF = "leaf"


class PathCandidate(NamedTuple):
    """Metadata field that may yield a project path.

    Attributes:
        field: Host property name, used for diagnostics only.
        lookup: Callable returning the property value; raises when the
            project kind does not support the field.
    """

    field: str
    lookup: Callable[[], str | None]


@runtime_checkable
class ProjectHandle(Protocol):
    """Opaque project-like node supplied by the host."""

    def unique_name(self) -> str:
        """Return the stable name used for ordering, dedupe and display."""

        raise NotImplementedError

    def kind(self) -> ProjectKind:
        """Return whether the node is a grouping folder or a project."""

        raise NotImplementedError

    def children(self) -> Sequence[ProjectHandle]:
        """Return nested nodes; raises when the node is unloaded."""

        raise NotImplementedError

    def path_candidates(self) -> Sequence[PathCandidate]:
        """Return path metadata fields in preference order."""

        raise NotImplementedError

    def file_reference_path(self) -> str:
        """Return the project file path, or an empty string when unknown."""

        raise NotImplementedError


@runtime_checkable
class SolutionSource(Protocol):
    """Enumerate the projects of a solution."""

    def list_top_level_projects(self) -> Sequence[ProjectHandle]:
        """Return the projects attached directly to the solution."""

        raise NotImplementedError

    def list_selected_projects(self) -> Sequence[ProjectHandle] | None:
        """Return the user's current project selection, if any."""

        raise NotImplementedError


@runtime_checkable
class RebuildTrigger(Protocol):
    """Start a full solution rebuild."""

    def start(self) -> bool:
        """Return ``True`` when the host accepted the rebuild request."""

        raise NotImplementedError


@runtime_checkable
class ProgressSink(Protocol):
    """Receive batch progress updates."""

    def set_total(self, total: int) -> None:
        raise NotImplementedError

    def set_current(self, index: int, label: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


@runtime_checkable
class LogSink(Protocol):
    """Receive timestamped output lines."""

    def write_line(self, message: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


__all__ = [
    "LogSink",
    "PathCandidate",
    "ProgressSink",
    "ProjectHandle",
    "ProjectKind",
    "RebuildTrigger",
    "SolutionSource",
]
