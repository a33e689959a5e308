# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands cleaning build outputs and optionally rebuilding."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.logging import enable_debug_logging
from ..hosts import ConsoleLogSink, ProcessRebuildTrigger, RichProgressSink
from ..orchestration import BatchReport, CleanupOrchestrator
from ..runtime.console.manager import get_console_manager
from ._clean_cli_models import (
    COMMAND_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    PROJECT_OPTION,
    SOLUTION_ARGUMENT,
    TARGET_OPTION,
    CleanCLIOptions,
    build_clean_options,
)
from ._clean_cli_services import emit_report, load_clean_config, load_solution
from .shared import CLIError, CLILogger, build_cli_logger


def _build_orchestrator(logger: CLILogger) -> CleanupOrchestrator:
    return CleanupOrchestrator(
        progress=RichProgressSink(get_console_manager().progress_console(color=logger.use_color)),
        log=ConsoleLogSink(logger.console),
    )


def _execute(options: CleanCLIOptions, *, rebuild: bool) -> None:
    if options.debug:
        enable_debug_logging()
    logger = build_cli_logger(emoji=options.emoji)
    try:
        solution = load_solution(options)
        config = load_clean_config(solution, options)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger.info(f"Solution: {solution.path}")
    orchestrator = _build_orchestrator(logger)
    report: BatchReport
    if rebuild:
        trigger = ProcessRebuildTrigger(config.rebuild_command, solution=solution.path)
        report = orchestrator.clean_and_rebuild(solution, config, trigger)
        if trigger.error:
            logger.warn(f"Rebuild command failed to start: {trigger.error}")
    else:
        report = orchestrator.clean_only(solution, config)
    raise typer.Exit(code=emit_report(report, logger=logger))


def clean(
    solution: SOLUTION_ARGUMENT = Path("."),
    project: PROJECT_OPTION = None,
    target: TARGET_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Empty the build output folders of every project in the solution."""

    _execute(build_clean_options(solution, project, target, emoji=emoji, debug=debug), rebuild=False)


def rebuild(
    solution: SOLUTION_ARGUMENT = Path("."),
    project: PROJECT_OPTION = None,
    target: TARGET_OPTION = None,
    command: COMMAND_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Empty the build output folders, then start a full rebuild."""

    options = build_clean_options(solution, project, target, emoji=emoji, debug=debug, command=command)
    _execute(options, rebuild=True)


def register(app: typer.Typer) -> None:
    """Register the clean and rebuild commands on ``app``."""

    app.command("clean")(clean)
    app.command("rebuild")(rebuild)


__all__ = ["clean", "rebuild", "register"]
