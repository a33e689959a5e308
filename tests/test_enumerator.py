# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for solution project enumeration."""

from __future__ import annotations

from cleanrebuild.discovery import ProjectEnumerator
from cleanrebuild.interfaces.host import ProjectKind
from tests.helpers.host import FakeProject, FakeSolution, folder, leaf


def _names(projects) -> list[str]:
    return [project.unique_name() for project in projects]


def test_enumerate_sorts_by_unique_name_and_is_repeatable() -> None:
    solution = FakeSolution(top=[leaf("Zeta"), leaf("alpha"), leaf("Beta")])
    enumerator = ProjectEnumerator()

    first = enumerator.enumerate(solution)
    second = enumerator.enumerate(FakeSolution(top=list(reversed(solution.top))))

    assert _names(first) == ["Beta", "Zeta", "alpha"]
    assert _names(second) == _names(first)


def test_folder_is_replaced_by_its_children() -> None:
    children = [leaf("App.Core"), leaf("App.Web"), leaf("App.Tests")]
    solution = FakeSolution(top=[folder("src", *children)])

    result = ProjectEnumerator().enumerate(solution)

    assert _names(result) == ["App.Core", "App.Tests", "App.Web"]
    assert "src" not in _names(result)


def test_nested_folders_are_flattened() -> None:
    solution = FakeSolution(top=[folder("src", folder("libs", leaf("Lib")), leaf("App")), leaf("Tool")])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["App", "Lib", "Tool"]


def test_selected_leaf_reachable_through_folder_appears_once() -> None:
    shared = leaf("Shared")
    group = folder("group", shared, leaf("Other"))
    solution = FakeSolution(top=[group], selected=[group, shared])

    result = ProjectEnumerator().enumerate(solution)

    assert _names(result) == ["Other", "Shared"]


def test_explicit_selection_overrides_solution_contents() -> None:
    picked = leaf("Picked")
    solution = FakeSolution(top=[leaf("Ignored"), picked])

    assert _names(ProjectEnumerator().enumerate(solution, [picked])) == ["Picked"]


def test_host_selection_seeds_enumeration() -> None:
    selected = leaf("Selected")
    solution = FakeSolution(top=[leaf("Other"), selected], selected=[selected])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Selected"]


def test_failing_selection_falls_back_to_top_level_projects() -> None:
    solution = FakeSolution(top=[leaf("A"), leaf("B")], selection_error=RuntimeError("no active window"))

    assert _names(ProjectEnumerator().enumerate(solution)) == ["A", "B"]


def test_unloaded_branch_is_excluded_without_aborting_siblings() -> None:
    unloaded = FakeProject(name="Unloaded", children_error=OSError("project unavailable"))
    broken_folder = FakeProject(
        name="Broken",
        kind_value=ProjectKind.FOLDER,
        children_error=RuntimeError("catastrophic failure"),
    )
    solution = FakeSolution(top=[unloaded, broken_folder, folder("ok", leaf("Loaded"))])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Loaded"]


def test_projects_without_name_are_excluded() -> None:
    nameless = leaf("")
    unreadable = leaf("Unreadable")
    unreadable.name_error = RuntimeError("property not available")
    solution = FakeSolution(top=[nameless, unreadable, leaf("Named")])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Named"]


def test_failing_kind_query_excludes_only_that_node() -> None:
    odd = leaf("Odd")
    odd.kind_error = RuntimeError("kind unavailable")
    solution = FakeSolution(top=[odd, leaf("Fine")])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Fine"]


def test_leaf_with_identity_is_not_descended() -> None:
    project = leaf("Website")
    project.nested = [leaf("Inner")]
    solution = FakeSolution(top=[project])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Website"]
    assert project.children_calls == 0


def test_project_container_without_identity_yields_sub_projects() -> None:
    container = FakeProject(name="Container", nested=[leaf("Sub")])
    solution = FakeSolution(top=[container])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Sub"]


def test_cyclic_folders_terminate() -> None:
    first = folder("first", leaf("A"))
    second = folder("second", first, leaf("B"))
    first.nested.append(second)
    solution = FakeSolution(top=[first, second])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["A", "B"]


def test_duplicate_handles_with_same_name_are_collapsed() -> None:
    solution = FakeSolution(top=[leaf("Same"), folder("f", leaf("Same"))])

    assert _names(ProjectEnumerator().enumerate(solution)) == ["Same"]
