"""Console reporter: CheckResult -> rich table."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from dichecks.application.reporters._base import BaseReporter
from dichecks.domain.model.enums import Severity

if TYPE_CHECKING:
    from dichecks.domain.model.check_result import CheckResult
    from dichecks.domain.model.issue import DICheckIssue

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.NOTE: "dim",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: issues as a colored table plus a status line."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force ANSI styling (None = autodetect)
            width: Console width (None = autodetect)
        """
        self._console = Console(
            file=output if output is not None else sys.stdout,
            force_terminal=force_terminal,
            width=width,
        )

    def report(self, result: CheckResult) -> None:
        """Render check results."""
        console = self._console
        console.rule("[bold]DI CHECKS[/bold]")

        if result.issues:
            console.print(self._build_table(result.issues))

        console.print(
            f"[bold]Sites:[/bold] {result.stats.sites_analyzed}  "
            f"[bold]Errors:[/bold] {result.error_count}  "
            f"[bold]Warnings:[/bold] {result.warning_count}  "
            f"[dim]({result.stats.analysis_time_ms:.0f}ms)[/dim]"
        )
        style = "bold green" if result.passed else "bold red"
        console.print(f"Result: [{style}]{self.status(result)}[/{style}]")

    def _build_table(self, issues: tuple[DICheckIssue, ...]) -> Table:
        table = Table(show_lines=False)
        table.add_column("Severity")
        table.add_column("Location")
        table.add_column("Message", overflow="fold")

        for issue in issues:
            style = _SEVERITY_STYLE[issue.severity]
            location = str(issue.location) if issue.location is not None else issue.subject
            table.add_row(
                f"[{style}]{issue.severity.name}[/{style}]",
                location,
                issue.message,
            )

        return table
