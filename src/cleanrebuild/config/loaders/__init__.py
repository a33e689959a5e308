# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Concrete configuration sources."""

from __future__ import annotations

from .sources import (
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
    DefaultConfigSource,
    PyProjectConfigSource,
    TomlConfigSource,
)

__all__ = [
    "DefaultConfigSource",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "PyProjectConfigSource",
    "TomlConfigSource",
]
