# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Delete the contents of configured build-output subdirectories."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .models import TargetOutcome, TargetStatus

LOGGER = logging.getLogger(__name__)


class UnsafeTargetError(OSError):
    """Raised when a target is a link, an unsafe name, or resolves outside the project root."""


class DirectoryCleaner:
    """Empty ``<root>/<name>`` for each configured target name.

    Only the contents are removed; the target directory itself is kept so
    tools holding a handle to it keep working. Read-only entries have their
    read-only flag cleared before deletion is retried. Targets that are links
    or junctions, or names that are not a single path component, are refused.
    """

    def clean(self, root: Path | None, target_names: Sequence[str]) -> list[TargetOutcome]:
        """Clean every existing target directory under ``root``.

        Args:
            root: Resolved project root, ``None`` when unresolvable.
            target_names: Subdirectory names to empty.

        Returns:
            list[TargetOutcome]: One outcome per attempted name. Processing
            stops at the first failed target; the failure is recorded, never
            raised.
        """

        if root is None or not target_names:
            return []
        outcomes: list[TargetOutcome] = []
        for name in target_names:
            target = root / name
            try:
                outcome = self._clean_target(root, name, target)
            except OSError as exc:
                failed_path = Path(exc.filename) if exc.filename else target
                message = exc.strerror or str(exc)
                LOGGER.debug("cleaning %s failed at %s: %s", target, failed_path, message)
                outcomes.append(TargetOutcome(name, failed_path, TargetStatus.FAILED, message=message))
                break
            outcomes.append(outcome)
        return outcomes

    def _clean_target(self, root: Path, name: str, target: Path) -> TargetOutcome:
        _ensure_single_name(name, target)
        if _is_link(target):
            raise UnsafeTargetError(0, f"{name} is a link; links are not followed", str(target))
        if not target.is_dir():
            return TargetOutcome(name, target, TargetStatus.MISSING)
        _ensure_contained(root, name, target)
        entries = sorted(target.iterdir())
        removed = 0
        for entry in entries:
            if entry.is_symlink() or not entry.is_dir():
                _unlink(entry)
                removed += 1
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                _rmtree(entry)
                removed += 1
        return TargetOutcome(name, target, TargetStatus.CLEANED, removed=removed)


def _ensure_single_name(name: str, target: Path) -> None:
    parts = Path(name).parts
    if len(parts) != 1 or parts[0] in (".", "..") or Path(name).anchor:
        raise UnsafeTargetError(0, f"{name!r} is not a single directory name", str(target))


def _is_link(path: Path) -> bool:
    if path.is_symlink():
        return True
    isjunction = getattr(os.path, "isjunction", None)
    return bool(isjunction and isjunction(path))


def _ensure_contained(root: Path, name: str, target: Path) -> None:
    """Refuse targets that resolve anywhere but ``root/name``."""

    resolved_root = root.resolve()
    resolved = target.resolve()
    if os.path.normcase(resolved) != os.path.normcase(resolved_root / name):
        raise UnsafeTargetError(
            0,
            f"{target.name} resolves to {resolved}, outside the project root",
            str(target),
        )


_RETRYABLE = (os.unlink, os.remove, os.rmdir)


def _clear_readonly(path: str | os.PathLike[str]) -> None:
    mode = os.stat(path).st_mode
    owner = stat.S_IRUSR | stat.S_IWUSR | (stat.S_IXUSR if stat.S_ISDIR(mode) else 0)
    os.chmod(path, stat.S_IMODE(mode) | owner)


def _unlink(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except PermissionError:
        _clear_readonly(path.parent)
        if not path.is_symlink():
            _clear_readonly(path)
        path.unlink(missing_ok=True)


def _retry_writable(
    func: Callable[..., Any],
    path: str,
    error: BaseException | tuple[Any, BaseException, Any],
) -> None:
    """``shutil.rmtree`` error hook that clears read-only flags and retries once."""

    exc = error[1] if isinstance(error, tuple) else error
    if func not in _RETRYABLE or not isinstance(exc, PermissionError):
        raise exc
    parent = os.path.dirname(path)
    if parent:
        _clear_readonly(parent)
    if not os.path.islink(path):
        _clear_readonly(path)
    func(path)


def _rmtree(path: Path) -> None:
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_retry_writable)
    else:
        shutil.rmtree(path, onerror=_retry_writable)


__all__ = ["DirectoryCleaner", "UnsafeTargetError"]
