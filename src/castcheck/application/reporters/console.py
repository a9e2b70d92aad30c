"""Console reporter: CheckResult → rich formatted output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from castcheck.application.reporters._base import BaseReporter
from castcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from castcheck.domain.model.check_result import CheckResult
    from castcheck.domain.model.diagnostic import Diagnostic

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_descriptions: Print each violated rule's description.
        max_diagnostics: Max diagnostics to display. None = unlimited.
        force_terminal: Emit ANSI styles even when output is not a tty.
        width: Console width in columns.
    """

    show_descriptions: bool = False
    max_diagnostics: int | None = None
    force_terminal: bool = False
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_diagnostics is not None and self.max_diagnostics < 0:
            raise ValueError(f"max_diagnostics must be >= 0, got {self.max_diagnostics}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs a rich table of diagnostics."""

    def __init__(
        self,
        output: TextIO | None = None,
        config: ConsoleConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._output = output if output is not None else sys.stdout
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> None:
        """Write the rendered result to the output stream."""
        self._output.write(self.render(result))

    def render(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with tables (and colors when forced).
        """
        buffer = StringIO()
        console = Console(
            file=buffer,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        self._render_header(console, result)

        shown = result.diagnostics
        if self._config.max_diagnostics is not None:
            shown = shown[: self._config.max_diagnostics]

        if shown:
            self._render_diagnostics(console, shown)
            hidden = result.diagnostic_count - len(shown)
            if hidden:
                console.print(f"[dim]... {hidden} more diagnostic(s) not shown[/dim]")

        if self._config.show_descriptions and result.diagnostics:
            self._render_descriptions(console, result.diagnostics)

        self._render_footer(console, result)
        return buffer.getvalue()

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.print()
        console.rule("[bold]CASTCHECK RESULT[/bold]")
        console.print()
        stats = result.stats
        console.print(
            f"[bold]Types:[/bold] {stats.types_analyzed}  "
            f"[bold]Castable implementations:[/bold] {stats.candidates_found}  "
            f"[bold]Diagnostics:[/bold] {result.diagnostic_count}"
        )
        console.print()

    def _render_diagnostics(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        table = Table(show_lines=False)
        table.add_column("Rule", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Location", no_wrap=True)
        table.add_column("Message")

        for diagnostic in diagnostics:
            location = diagnostic.location
            table.add_row(
                diagnostic.rule_id,
                f"[{_SEVERITY_STYLES[diagnostic.severity]}]{diagnostic.severity.name}[/]",
                escape(location.short) if location is not None else "<metadata>",
                escape(diagnostic.message),
            )

        console.print(table)
        console.print()

    def _render_descriptions(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        seen: set[str] = set()
        for diagnostic in diagnostics:
            descriptor = diagnostic.descriptor
            if descriptor.id in seen:
                continue
            seen.add(descriptor.id)
            console.print(f"[bold]{descriptor.id}[/bold] {escape(descriptor.title)}")
            if descriptor.description:
                console.print(f"  {escape(descriptor.description)}")
            if descriptor.help_link:
                console.print(f"  [dim]{descriptor.help_link}[/dim]")
            console.print()

    def _render_footer(self, console: Console, result: CheckResult) -> None:
        if result.stats.cancelled:
            console.print("[yellow]Analysis cancelled before all types were analyzed[/yellow]")
        status = "[green]PASSED[/green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status}")
