# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Solution-wide build output cleanup with an optional rebuild."""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]
