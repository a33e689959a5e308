# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loading."""

from __future__ import annotations

from .loader import ConfigLoader
from .models import (
    DEFAULT_REBUILD_COMMAND,
    DEFAULT_TARGET_SUBDIRECTORIES,
    SOLUTION_PLACEHOLDER,
    CleanConfig,
    ConfigError,
    build_clean_config,
    normalise_target_names,
)

__all__ = [
    "CleanConfig",
    "ConfigError",
    "ConfigLoader",
    "DEFAULT_REBUILD_COMMAND",
    "DEFAULT_TARGET_SUBDIRECTORIES",
    "SOLUTION_PLACEHOLDER",
    "build_clean_config",
    "normalise_target_names",
]
