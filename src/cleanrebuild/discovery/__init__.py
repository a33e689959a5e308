# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project discovery over host-supplied solution graphs."""

from __future__ import annotations

from .enumerator import ProjectEnumerator, project_identity, project_name
from .paths import PathResolver, ResolvedProject

__all__ = [
    "PathResolver",
    "ProjectEnumerator",
    "ResolvedProject",
    "project_identity",
    "project_name",
]
