# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers."""

from __future__ import annotations

from .public import emoji, enable_debug_logging, fail, info, ok, section, warn

__all__ = [
    "emoji",
    "enable_debug_logging",
    "fail",
    "info",
    "ok",
    "section",
    "warn",
]
