# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Drive enumerate, clean, and optional rebuild for a solution."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from datetime import datetime

from ..clean.models import CleanupResult
from ..clean.runner import DirectoryCleaner
from ..config.models import CleanConfig
from ..discovery.enumerator import ProjectEnumerator, project_name
from ..discovery.paths import PathResolver
from ..interfaces.host import LogSink, ProgressSink, ProjectHandle, RebuildTrigger, SolutionSource
from .models import BatchReport, CleanupMode, OrchestratorState, describe_targets, format_elapsed

LOGGER = logging.getLogger(__name__)


def timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``HH:MM:SS.ffff``."""

    return f"{moment:%H:%M:%S}.{moment.microsecond // 100:04d}"


class CleanupOrchestrator:
    """Run cleanup batches against a solution.

    One instance is created by the composition root and reused; every call
    starts a fresh batch with its own timer and configuration snapshot.
    """

    def __init__(
        self,
        *,
        progress: ProgressSink,
        log: LogSink,
        enumerator: ProjectEnumerator | None = None,
        resolver: PathResolver | None = None,
        cleaner: DirectoryCleaner | None = None,
        timer: Callable[[], float] = time.perf_counter,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._progress = progress
        self._log = log
        self._enumerator = enumerator or ProjectEnumerator()
        self._resolver = resolver or PathResolver()
        self._cleaner = cleaner or DirectoryCleaner()
        self._timer = timer
        self._clock = clock
        self.state = OrchestratorState.IDLE

    def clean_only(
        self,
        solution: SolutionSource,
        config: CleanConfig,
        *,
        selected: Sequence[ProjectHandle] | None = None,
    ) -> BatchReport:
        """Clean every project of ``solution`` without rebuilding."""

        return self._run(solution, config, CleanupMode.CLEAN_ONLY, None, selected)

    def clean_and_rebuild(
        self,
        solution: SolutionSource,
        config: CleanConfig,
        rebuild_trigger: RebuildTrigger | None,
        *,
        selected: Sequence[ProjectHandle] | None = None,
    ) -> BatchReport:
        """Clean every project of ``solution`` then start a rebuild once.

        Args:
            solution: Host solution to process.
            config: Configuration; its target list is snapshotted on entry.
            rebuild_trigger: Host rebuild entry point, ``None`` when the host
                build manager is unavailable.
            selected: Optional explicit project selection.

        Returns:
            BatchReport: Outcome; ``success`` is ``False`` when the rebuild
            could not be started.
        """

        return self._run(solution, config, CleanupMode.CLEAN_AND_REBUILD, rebuild_trigger, selected)

    def _run(
        self,
        solution: SolutionSource,
        config: CleanConfig,
        mode: CleanupMode,
        rebuild_trigger: RebuildTrigger | None,
        selected: Sequence[ProjectHandle] | None,
    ) -> BatchReport:
        report = BatchReport(mode=mode, targets=config.snapshot())
        started = self._timer()
        try:
            self.state = OrchestratorState.ENUMERATING
            projects = self._enumerator.enumerate(solution, selected)
            self._log.clear()
            self._write(f"Starting... Projects to clean: {len(projects)}")
            self._progress.set_total(len(projects))

            self.state = OrchestratorState.CLEANING
            for index, project in enumerate(projects, start=1):
                report.results.append(self._clean_project(index, len(projects), project, report.targets))

            if mode is CleanupMode.CLEAN_AND_REBUILD:
                self.state = OrchestratorState.REBUILDING
                report.rebuild_started = self._start_rebuild(rebuild_trigger, report.targets)
        finally:
            self.state = OrchestratorState.REPORTING
            report.elapsed = self._timer() - started
            self._progress.clear()
            self._write(f"Finished. Elapsed: {format_elapsed(report.elapsed)}")
            self._write(report.summary)
            self.state = OrchestratorState.IDLE
        return report

    def _clean_project(self, index: int, total: int, project: ProjectHandle, targets: tuple[str, ...]) -> CleanupResult:
        name = project_name(project)
        root = self._resolver.resolve_project(project).root
        label = f"Cleaning {name}"
        self._write(label)
        self._progress.set_current(index, label)
        if root is None:
            LOGGER.debug("%s/%s %s: no resolvable root", index, total, name)
            return CleanupResult.skipped(name)
        try:
            outcomes = self._cleaner.clean(root, targets)
        except Exception as exc:  # pylint: disable=broad-exception-caught -- one project must not abort the batch
            LOGGER.debug("cleaning %s raised", name, exc_info=True)
            result = CleanupResult.failed(name, root, str(exc) or type(exc).__name__)
        else:
            result = CleanupResult.from_outcomes(name, root, outcomes)
        if result.message is not None:
            self._write(f"Error while cleaning directory {result.path}: {result.message}")
        return result

    def _start_rebuild(self, trigger: RebuildTrigger | None, targets: tuple[str, ...]) -> bool:
        if trigger is None:
            LOGGER.debug("no rebuild trigger available")
            return False
        self._write(f"Cleaned {describe_targets(targets)}, rebuilding solution")
        try:
            return bool(trigger.start())
        except Exception as exc:  # pylint: disable=broad-exception-caught -- host build managers raise arbitrary errors
            self._write(f"Rebuild could not be started: {exc}")
            return False

    def _write(self, message: str) -> None:
        self._log.write_line(f"{timestamp(self._clock())}: {message}")


__all__ = ["CleanupOrchestrator", "timestamp"]
