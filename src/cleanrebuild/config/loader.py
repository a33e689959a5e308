# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

from ..interfaces.config import ConfigSource
from .loaders import DefaultConfigSource, PyProjectConfigSource, TomlConfigSource
from .models import CleanConfig, ConfigError, build_clean_config

CONFIG_FILENAME: Final[str] = ".cleanrebuild.toml"

LOGGER = logging.getLogger(__name__)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            sources: Ordered collection of configuration sources; later
                sources override keys set by earlier ones.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(
        cls,
        root: Path,
        *,
        user_config: Path | None = None,
        project_config: Path | None = None,
    ) -> ConfigLoader:
        """Build a loader that respects default, user, and project sources.

        Args:
            root: Solution directory used to discover configuration files.
            user_config: Optional path to a user-level override.
            project_config: Optional project-level override path.

        Returns:
            ConfigLoader: Loader configured with default precedence ordering.
        """

        root = root.resolve()
        home_config = user_config if user_config is not None else Path.home() / CONFIG_FILENAME
        project_file = project_config if project_config is not None else root / CONFIG_FILENAME
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            TomlConfigSource(home_config),
        ]
        pyproject = root / "pyproject.toml"
        if pyproject.is_file():
            sources.append(PyProjectConfigSource(pyproject))
        sources.append(TomlConfigSource(project_file))
        return cls(sources=sources)

    def load(self) -> CleanConfig:
        """Return the merged configuration.

        Raises:
            ConfigError: If a source is unreadable or the merged values are invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            LOGGER.debug("applying %s: %s", source.describe(), sorted(fragment))
            merged.update(fragment)
        try:
            return build_clean_config(merged)
        except ConfigError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "ConfigLoader"]
