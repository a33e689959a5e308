# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the process-based rebuild trigger."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from cleanrebuild.hosts import ProcessRebuildTrigger


class RecordingLauncher:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[list[str], dict[str, Any]]] = []
        self._error = error

    def __call__(self, args: list[str], **kwargs: Any) -> SimpleNamespace:
        self.calls.append((args, kwargs))
        if self._error is not None:
            raise self._error
        return SimpleNamespace(pid=4242)


def test_start_substitutes_solution_and_does_not_wait(tmp_path: Path) -> None:
    solution = tmp_path / "Demo.sln"
    launcher = RecordingLauncher()
    trigger = ProcessRebuildTrigger([sys.executable, "build", "{solution}"], solution=solution, launcher=launcher)

    assert trigger.start() is True
    [(args, kwargs)] = launcher.calls
    assert args[1:] == ["build", str(solution)]
    assert kwargs == {"cwd": str(tmp_path)}
    assert trigger.process is not None
    assert trigger.error is None


def test_unknown_executable_is_not_started(tmp_path: Path) -> None:
    launcher = RecordingLauncher()
    trigger = ProcessRebuildTrigger(
        ["definitely-not-a-build-tool-xyz", "{solution}"],
        solution=tmp_path / "Demo.sln",
        launcher=launcher,
    )

    assert trigger.start() is False
    assert launcher.calls == []
    assert "was not found on PATH" in (trigger.error or "")


def test_launch_failure_is_reported(tmp_path: Path) -> None:
    launcher = RecordingLauncher(error=PermissionError(13, "Permission denied"))
    trigger = ProcessRebuildTrigger([sys.executable], solution=tmp_path / "Demo.sln", launcher=launcher)

    assert trigger.start() is False
    assert "Permission denied" in (trigger.error or "")
