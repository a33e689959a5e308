# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for project root resolution."""

from __future__ import annotations

from pathlib import Path

from cleanrebuild.discovery import PathResolver
from cleanrebuild.interfaces.host import PathCandidate
from tests.helpers.host import FakeProject, unsupported


def test_primary_failure_falls_back_to_secondary_field(tmp_path: Path) -> None:
    project_dir = tmp_path / "proj"
    project_dir.mkdir()
    project = FakeProject(
        name="proj",
        reference=str(project_dir / "proj.vcxproj"),
        candidates=[unsupported("FullPath"), PathCandidate("ProjectDirectory", lambda: str(project_dir))],
    )

    assert PathResolver().resolve(project) == project_dir


def test_empty_identity_is_unresolvable(tmp_path: Path) -> None:
    project = FakeProject(name="p", candidates=[PathCandidate("FullPath", lambda: str(tmp_path))])

    assert PathResolver().resolve(project) is None


def test_candidate_naming_a_file_resolves_to_its_directory(tmp_path: Path) -> None:
    project_file = tmp_path / "Setup.vdproj"
    project_file.write_text("", encoding="utf-8")
    project = FakeProject(
        name="Setup",
        reference=str(project_file),
        candidates=[
            unsupported("FullPath"),
            unsupported("ProjectDirectory"),
            PathCandidate("ProjectPath", lambda: str(project_file)),
        ],
    )

    assert PathResolver().resolve(project) == tmp_path


def test_empty_candidates_fall_back_to_project_file(tmp_path: Path) -> None:
    project_file = tmp_path / "App.csproj"
    project_file.write_text("<Project />", encoding="utf-8")
    project = FakeProject(
        name="App",
        reference=str(project_file),
        candidates=[PathCandidate("FullPath", lambda: ""), PathCandidate("ProjectDirectory", lambda: None)],
    )

    assert PathResolver().resolve(project) == tmp_path


def test_missing_project_file_without_candidates_is_unresolvable(tmp_path: Path) -> None:
    project = FakeProject(name="Gone", reference=str(tmp_path / "Gone.csproj"))

    assert PathResolver().resolve(project) is None


def test_candidate_pointing_nowhere_is_unresolvable(tmp_path: Path) -> None:
    project_file = tmp_path / "App.csproj"
    project_file.write_text("<Project />", encoding="utf-8")
    project = FakeProject(
        name="App",
        reference=str(project_file),
        candidates=[PathCandidate("FullPath", lambda: str(tmp_path / "missing"))],
    )

    assert PathResolver().resolve(project) is None


def test_failing_candidate_listing_uses_project_file(tmp_path: Path) -> None:
    project_file = tmp_path / "App.csproj"
    project_file.write_text("<Project />", encoding="utf-8")

    class BrokenCandidates(FakeProject):
        def path_candidates(self):
            raise RuntimeError("properties unavailable")

    project = BrokenCandidates(name="App", reference=str(project_file))

    assert PathResolver().resolve(project) == tmp_path


def test_resolve_project_pairs_handle_and_root(tmp_path: Path) -> None:
    project = FakeProject(
        name="App",
        reference=str(tmp_path / "App.csproj"),
        candidates=[PathCandidate("FullPath", lambda: str(tmp_path))],
    )

    resolved = PathResolver().resolve_project(project)

    assert resolved.project is project
    assert resolved.root == tmp_path
