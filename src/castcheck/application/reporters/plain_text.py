"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from castcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from castcheck.domain.model.check_result import CheckResult
    from castcheck.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    One compiler-style line per diagnostic, then a summary.
    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for diagnostic in result.diagnostics:
            self._write(self._format_diagnostic(diagnostic))

        if result.diagnostics:
            self._write()
        self._report_summary(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _format_diagnostic(self, diagnostic: Diagnostic) -> str:
        where = str(diagnostic.location) if diagnostic.location is not None else "<metadata>"
        return (
            f"{where}: {diagnostic.severity.name.lower()} {diagnostic.rule_id}: "
            f"{diagnostic.message}"
        )

    def _report_summary(self, result: CheckResult) -> None:
        stats = result.stats
        self._write(
            f"{stats.types_analyzed} type(s) analyzed, "
            f"{stats.candidates_found} castable implementation(s), "
            f"{result.error_count} error(s), {result.warning_count} warning(s)"
        )
        if stats.cancelled:
            self._write("Analysis cancelled before all types were analyzed")
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")
