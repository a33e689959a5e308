# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build-output directory cleanup helpers."""

from __future__ import annotations

from .models import CleanupResult, ProjectStatus, TargetOutcome, TargetStatus
from .runner import DirectoryCleaner, UnsafeTargetError

__all__ = [
    "CleanupResult",
    "DirectoryCleaner",
    "ProjectStatus",
    "TargetOutcome",
    "TargetStatus",
    "UnsafeTargetError",
]
