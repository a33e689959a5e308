# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rebuild trigger that launches an external build command."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from ..config.models import SOLUTION_PLACEHOLDER

LOGGER = logging.getLogger(__name__)


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        raise ValueError("rebuild command requires at least one argument")
    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]
    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


class ProcessRebuildTrigger:
    """Start the configured build command without waiting for it.

    ``{solution}`` in any argument is replaced by the solution file path. The
    spawned process inherits the console, so build output appears as it runs.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        solution: Path,
        launcher: Callable[..., subprocess.Popen[bytes]] | None = None,
    ) -> None:
        self._command = [argument.replace(SOLUTION_PLACEHOLDER, str(solution)) for argument in command]
        self._cwd = solution.parent
        self._launcher = launcher or subprocess.Popen
        self.process: subprocess.Popen[bytes] | None = None
        self.error: str | None = None

    def start(self) -> bool:
        """Launch the build; return ``False`` when it cannot be started."""

        try:
            self.process = self._launcher(_normalize_args(self._command), cwd=str(self._cwd))
        except (OSError, ValueError) as exc:
            self.error = str(exc)
            LOGGER.debug("rebuild command %s failed to start: %s", self._command, exc)
            return False
        LOGGER.debug("rebuild started with pid %s", self.process.pid)
        return True


__all__ = ["ProcessRebuildTrigger"]
