# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the clean and rebuild commands."""

from __future__ import annotations

import shlex

from rich.table import Table

from ..config import CleanConfig, ConfigError, ConfigLoader
from ..hosts import SolutionFile, SolutionFileError, discover_solution
from ..orchestration import BatchReport
from ._clean_cli_models import CleanCLIOptions
from .shared import EXIT_INCOMPLETE, EXIT_OK, CLIError, CLILogger


def load_solution(options: CleanCLIOptions) -> SolutionFile:
    """Locate and parse the solution, applying any ``--project`` selection.

    Raises:
        CLIError: If the solution cannot be found or a project is unknown.
    """

    try:
        solution = SolutionFile.load(discover_solution(options.solution))
        if options.projects:
            solution.select(options.projects)
    except SolutionFileError as exc:
        raise CLIError(str(exc)) from exc
    return solution


def load_clean_config(solution: SolutionFile, options: CleanCLIOptions) -> CleanConfig:
    """Return the configuration for ``solution`` with CLI overrides applied.

    Raises:
        CLIError: If configuration files or overrides are invalid.
    """

    try:
        config = ConfigLoader.for_root(solution.directory).load()
        if options.targets:
            config = config.with_targets(options.targets)
        if options.command:
            config.rebuild_command = shlex.split(options.command)
    except (ConfigError, ValueError) as exc:
        raise CLIError(str(exc)) from exc
    return config


def emit_report(report: BatchReport, *, logger: CLILogger) -> int:
    """Render the batch outcome and return the command exit code.

    Args:
        report: Outcome produced by the orchestrator.
        logger: Logger used to emit messages.

    Returns:
        int: ``0`` on full success, ``1`` when any project failed or the
        rebuild could not be started.
    """

    failures = report.failures
    if failures:
        logger.section("Cleanup failures")
        table = Table("Project", "Path", "Error")
        for result in failures:
            table.add_row(result.project, str(result.path or ""), result.message or "")
        logger.console.print(table)
    for result in report.skipped:
        logger.warn(f"Skipped {result.project}: {result.message}")
    removed = sum(result.removed for result in report.results)
    counts = f"{report.succeeded}/{report.total} projects cleaned, {removed} entries removed"
    if failures or not report.success:
        logger.fail(f"{report.summary} ({counts})")
        return EXIT_INCOMPLETE
    logger.ok(f"{report.summary} ({counts})")
    return EXIT_OK


__all__ = ["emit_report", "load_clean_config", "load_solution"]
