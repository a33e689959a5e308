# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.helpers.host import RecordingLog, RecordingProgress


@pytest.fixture
def progress() -> RecordingProgress:
    """Return a progress sink that records every call."""
    return RecordingProgress()


@pytest.fixture
def log_sink() -> RecordingLog:
    """Return a log sink that keeps written lines."""
    return RecordingLog()


@pytest.fixture
def make_project_root(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory creating ``<tmp>/<name>`` with ``bin`` and ``obj`` outputs."""

    def _make(name: str) -> Path:
        root = tmp_path / name
        (root / "bin" / "Debug").mkdir(parents=True)
        (root / "bin" / "Debug" / f"{name}.dll").write_text("dll", encoding="utf-8")
        (root / "obj").mkdir()
        (root / "obj" / "project.assets.json").write_text("{}", encoding="utf-8")
        (root / f"{name}.csproj").write_text("<Project />", encoding="utf-8")
        return root

    return _make
