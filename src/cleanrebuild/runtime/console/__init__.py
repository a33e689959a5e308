# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console provisioning."""

from __future__ import annotations

from .manager import ConsoleProfile, RichConsoleManager, Stream, detect_tty, get_console_manager

__all__ = ["ConsoleProfile", "RichConsoleManager", "Stream", "detect_tty", "get_console_manager"]
