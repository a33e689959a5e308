# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory host doubles for the cleanup engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cleanrebuild.interfaces.host import PathCandidate, ProjectHandle, ProjectKind


@dataclass(eq=False)
class FakeProject:
    """Project handle whose queries can be made to fail."""

    name: str
    reference: str = ""
    kind_value: ProjectKind = ProjectKind.LEAF
    nested: list[ProjectHandle] = field(default_factory=list)
    candidates: list[PathCandidate] = field(default_factory=list)
    children_error: Exception | None = None
    name_error: Exception | None = None
    kind_error: Exception | None = None
    children_calls: int = 0

    def unique_name(self) -> str:
        if self.name_error is not None:
            raise self.name_error
        return self.name

    def kind(self) -> ProjectKind:
        if self.kind_error is not None:
            raise self.kind_error
        return self.kind_value

    def children(self) -> Sequence[ProjectHandle]:
        self.children_calls += 1
        if self.children_error is not None:
            raise self.children_error
        return list(self.nested)

    def path_candidates(self) -> Sequence[PathCandidate]:
        return list(self.candidates)

    def file_reference_path(self) -> str:
        return self.reference


def leaf(name: str, root: Path | None = None) -> FakeProject:
    """Return a loaded project, rooted at ``root`` when given."""

    if root is None:
        return FakeProject(name=name, reference=f"/virtual/{name}.csproj")
    project_file = root / f"{name}.csproj"
    return FakeProject(
        name=name,
        reference=str(project_file),
        candidates=[PathCandidate("FullPath", lambda: str(root))],
    )


def folder(name: str, *children: ProjectHandle) -> FakeProject:
    return FakeProject(name=name, kind_value=ProjectKind.FOLDER, nested=list(children))


def unsupported(field_name: str) -> PathCandidate:
    """Return a candidate whose lookup raises like an unsupported property."""

    def _lookup() -> str:
        raise KeyError(field_name)

    return PathCandidate(field_name, _lookup)


@dataclass
class FakeSolution:
    top: list[ProjectHandle] = field(default_factory=list)
    selected: list[ProjectHandle] | None = None
    selection_error: Exception | None = None

    def list_top_level_projects(self) -> Sequence[ProjectHandle]:
        return list(self.top)

    def list_selected_projects(self) -> Sequence[ProjectHandle] | None:
        if self.selection_error is not None:
            raise self.selection_error
        return self.selected


@dataclass
class RecordingProgress:
    events: list[tuple[Any, ...]] = field(default_factory=list)

    def set_total(self, total: int) -> None:
        self.events.append(("total", total))

    def set_current(self, index: int, label: str) -> None:
        self.events.append(("current", index, label))

    def clear(self) -> None:
        self.events.append(("clear",))


@dataclass
class RecordingLog:
    lines: list[str] = field(default_factory=list)
    clears: int = 0

    def write_line(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        self.clears += 1
        self.lines.clear()


@dataclass
class FakeTrigger:
    events: list[tuple[Any, ...]]
    accept: bool = True
    error: Exception | None = None
    calls: int = 0

    def start(self) -> bool:
        self.calls += 1
        self.events.append(("rebuild",))
        if self.error is not None:
            raise self.error
        return self.accept
