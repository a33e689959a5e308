# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Solution source backed by a Visual Studio ``.sln`` file.

Only the two constructs needed to build the project graph are read: the
``Project(...) = ...`` entries and the ``NestedProjects`` global section that
places projects inside solution folders. Project files themselves are never
parsed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Final

from ..interfaces.host import PathCandidate, ProjectHandle, ProjectKind

SOLUTION_FOLDER_TYPE: Final[str] = "2150E333-8FDC-42A3-9474-1A3956D46DE8"
MANAGED_PROJECT_SUFFIXES: Final[frozenset[str]] = frozenset(
    {".csproj", ".vbproj", ".fsproj", ".sqlproj", ".pyproj", ".njsproj", ".shproj", ".esproj"}
)
NATIVE_PROJECT_SUFFIXES: Final[frozenset[str]] = frozenset({".vcxproj", ".vcproj"})

_PROJECT_RE: Final[re.Pattern[str]] = re.compile(
    r'^Project\("\{(?P<type>[^}]+)\}"\)\s*=\s*"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[^}]+)\}"'
)
_NESTED_RE: Final[re.Pattern[str]] = re.compile(r"^\{(?P<child>[^}]+)\}\s*=\s*\{(?P<parent>[^}]+)\}$")
_NESTED_START: Final[str] = "GlobalSection(NestedProjects)"
_SECTION_END: Final[str] = "EndGlobalSection"


class SolutionFileError(RuntimeError):
    """Raised when a solution file cannot be located, read, or parsed."""


@dataclass(slots=True)
class SolutionEntry:
    """A ``Project`` record of a solution file."""

    type_guid: str
    name: str
    path: str
    guid: str
    children: list[SolutionEntry] = field(default_factory=list)
    nested: bool = False

    @property
    def is_folder(self) -> bool:
        return self.type_guid.upper() == SOLUTION_FOLDER_TYPE


def parse_solution(text: str) -> list[SolutionEntry]:
    """Parse solution ``text`` into entries with nesting applied.

    Args:
        text: Solution file contents.

    Returns:
        list[SolutionEntry]: Entries in file order.

    Raises:
        SolutionFileError: If a ``NestedProjects`` line references an unknown GUID.
    """

    entries: dict[str, SolutionEntry] = {}
    in_nested = False
    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if match := _PROJECT_RE.match(line):
            entry = SolutionEntry(
                type_guid=match["type"],
                name=match["name"],
                path=match["path"],
                guid=match["guid"].upper(),
            )
            entries[entry.guid] = entry
        elif line.startswith(_NESTED_START):
            in_nested = True
        elif line.startswith(_SECTION_END):
            in_nested = False
        elif in_nested and (nested := _NESTED_RE.match(line)):
            child = entries.get(nested["child"].upper())
            parent = entries.get(nested["parent"].upper())
            if child is None or parent is None:
                raise SolutionFileError(f"line {number}: nested project references an unknown project")
            parent.children.append(child)
            child.nested = True
    return list(entries.values())


class SolutionProject:
    """:class:`ProjectHandle` over a solution entry."""

    def __init__(self, entry: SolutionEntry, solution_dir: Path, registry: Mapping[str, SolutionProject]) -> None:
        self._entry = entry
        self._solution_dir = solution_dir
        self._registry = registry

    def __repr__(self) -> str:
        return f"SolutionProject({self.unique_name()!r})"

    @property
    def display_name(self) -> str:
        return self._entry.name

    def unique_name(self) -> str:
        return self._entry.name if self._entry.is_folder else self._entry.path

    def kind(self) -> ProjectKind:
        return ProjectKind.FOLDER if self._entry.is_folder else ProjectKind.LEAF

    def children(self) -> Sequence[ProjectHandle]:
        return [self._registry[child.guid] for child in self._entry.children]

    def file_reference_path(self) -> str:
        if self._entry.is_folder or not self._entry.path:
            return ""
        return str(self._project_path())

    def path_candidates(self) -> Sequence[PathCandidate]:
        return (
            PathCandidate("FullPath", self._full_path),
            PathCandidate("ProjectDirectory", self._project_directory),
            PathCandidate("ProjectPath", self._project_file),
        )

    def _project_path(self) -> Path:
        relative = PureWindowsPath(self._entry.path)
        return self._solution_dir.joinpath(*relative.parts)

    def _full_path(self) -> str:
        path = self._project_path()
        if not path.suffix:
            return str(path)
        if path.suffix.lower() in MANAGED_PROJECT_SUFFIXES:
            return str(path.parent)
        raise KeyError("FullPath")

    def _project_directory(self) -> str:
        path = self._project_path()
        if path.suffix.lower() in NATIVE_PROJECT_SUFFIXES:
            return str(path.parent)
        raise KeyError("ProjectDirectory")

    def _project_file(self) -> str:
        return str(self._project_path())


class SolutionFile:
    """:class:`SolutionSource` reading projects from a ``.sln`` file."""

    def __init__(self, path: Path, entries: Iterable[SolutionEntry]) -> None:
        self.path = path
        self._entries = list(entries)
        self._handles: dict[str, SolutionProject] = {}
        for entry in self._entries:
            self._handles[entry.guid] = SolutionProject(entry, self.directory, self._handles)
        self._selected: list[ProjectHandle] = []

    @classmethod
    def load(cls, path: Path) -> SolutionFile:
        """Read and parse the solution at ``path``.

        Raises:
            SolutionFileError: If the file cannot be read or parsed.
        """

        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise SolutionFileError(f"Unable to read solution {path}: {exc}") from exc
        try:
            entries = parse_solution(text)
        except SolutionFileError as exc:
            raise SolutionFileError(f"{path}: {exc}") from exc
        return cls(path.resolve(), entries)

    @property
    def directory(self) -> Path:
        return self.path.parent

    def projects(self) -> list[SolutionProject]:
        """Return a handle for every entry, nested or not."""

        return [self._handles[entry.guid] for entry in self._entries]

    def list_top_level_projects(self) -> Sequence[ProjectHandle]:
        return [self._handles[entry.guid] for entry in self._entries if not entry.nested]

    def list_selected_projects(self) -> Sequence[ProjectHandle] | None:
        return list(self._selected) or None

    def select(self, names: Iterable[str]) -> list[ProjectHandle]:
        """Mark the projects matching ``names`` as the active selection.

        Names match a project's unique name or display name, case-insensitively.

        Raises:
            SolutionFileError: If a name matches nothing.
        """

        wanted = [name.strip() for name in names if name.strip()]
        projects = self.projects()
        selection: list[ProjectHandle] = []
        for name in wanted:
            key = name.casefold()
            matches = [
                project
                for project in projects
                if key in {project.unique_name().casefold(), project.display_name.casefold()}
            ]
            if not matches:
                raise SolutionFileError(f"No project named {name!r} in {self.path.name}")
            selection.extend(matches)
        self._selected = selection
        return list(selection)


def discover_solution(path: Path) -> Path:
    """Return the solution file designated by ``path``.

    Args:
        path: A ``.sln`` file, or a directory containing exactly one.

    Returns:
        Path: Resolved solution file path.

    Raises:
        SolutionFileError: If no single solution file can be determined.
    """

    if path.is_file():
        return path.resolve()
    if not path.is_dir():
        raise SolutionFileError(f"{path} does not exist")
    candidates = sorted(path.glob("*.sln"))
    if not candidates:
        raise SolutionFileError(f"No .sln file found in {path}")
    if len(candidates) > 1:
        names = ", ".join(candidate.name for candidate in candidates)
        raise SolutionFileError(f"Multiple solution files in {path}: {names}")
    return candidates[0].resolve()


__all__ = [
    "SOLUTION_FOLDER_TYPE",
    "SolutionEntry",
    "SolutionFile",
    "SolutionFileError",
    "SolutionProject",
    "discover_solution",
    "parse_solution",
]
