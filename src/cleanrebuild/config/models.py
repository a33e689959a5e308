# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for solution cleanup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_TARGET_SUBDIRECTORIES: Final[tuple[str, ...]] = ("bin", "obj")
SOLUTION_PLACEHOLDER: Final[str] = "{solution}"
DEFAULT_REBUILD_COMMAND: Final[tuple[str, ...]] = ("dotnet", "build", SOLUTION_PLACEHOLDER, "--no-incremental")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def normalise_target_names(values: Iterable[str]) -> list[str]:
    """Return trimmed, de-duplicated target names preserving order.

    Args:
        values: Raw subdirectory names.

    Returns:
        list[str]: Names safe to join onto a project root.

    Raises:
        ValueError: If a name is absolute, nested, or refers to a parent.
    """

    names: list[str] = []
    for raw in values:
        name = raw.strip()
        if not name or name in names:
            continue
        if name in {".", ".."} or PureWindowsPath(name).drive or not _is_single_part(name):
            raise ValueError(f"target subdirectory {raw!r} must be a single directory name")
        names.append(name)
    return names


def _is_single_part(name: str) -> bool:
    return all(len(flavour(name).parts) == 1 for flavour in (PurePosixPath, PureWindowsPath))


class CleanConfig(BaseModel):
    """Subdirectories to clean and the command used to rebuild afterwards."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    target_subdirectories: list[str] = Field(default_factory=lambda: list(DEFAULT_TARGET_SUBDIRECTORIES))
    rebuild_command: list[str] = Field(default_factory=lambda: list(DEFAULT_REBUILD_COMMAND))

    @field_validator("target_subdirectories")
    @classmethod
    def _check_targets(cls, value: list[str]) -> list[str]:
        return normalise_target_names(value)

    @field_validator("rebuild_command")
    @classmethod
    def _check_command(cls, value: list[str]) -> list[str]:
        if not value or not value[0].strip():
            raise ValueError("rebuild_command must name an executable")
        return value

    def snapshot(self) -> tuple[str, ...]:
        """Return an immutable copy of the target names for one batch."""

        return tuple(self.target_subdirectories)

    def with_targets(self, names: Iterable[str]) -> CleanConfig:
        """Return a copy whose target list is replaced by ``names``.

        Raises:
            ConfigError: If any name is not a plain directory name.
        """

        return build_clean_config({**self.model_dump(), "target_subdirectories": list(names)})


def build_clean_config(data: Mapping[str, Any]) -> CleanConfig:
    """Validate ``data`` into a :class:`CleanConfig`.

    Args:
        data: Merged configuration mapping.

    Returns:
        CleanConfig: Validated configuration.

    Raises:
        ConfigError: If validation fails.
    """

    try:
        return CleanConfig.model_validate(dict(data))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(details) from exc


__all__ = [
    "CleanConfig",
    "ConfigError",
    "DEFAULT_REBUILD_COMMAND",
    "DEFAULT_TARGET_SUBDIRECTORIES",
    "SOLUTION_PLACEHOLDER",
    "build_clean_config",
    "normalise_target_names",
]
