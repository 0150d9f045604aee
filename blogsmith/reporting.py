"""Completion reporting for builds."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from rich import print as rprint
from rich.markup import escape

from blogsmith.models import BuildResult

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Build complete!"


@runtime_checkable
class Reporter(Protocol):
    """Receives the terminal outcome of a build, exactly once."""

    def report(self, result: BuildResult) -> None: ...


class ConsoleReporter:
    def report(self, result: BuildResult) -> None:
        if result.error is not None:
            rprint(f"[red]Error:[/red] {escape(str(result.error))}")
            return
        rprint(f"[green]{SUCCESS_MESSAGE}[/green]")


class LoggingReporter:
    def report(self, result: BuildResult) -> None:
        if result.error is not None:
            logger.error("Build failed: %s", result.error)
            return
        logger.info("%s (%d files in %.2fs)", SUCCESS_MESSAGE, len(result.written), result.duration)
