"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from castcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from castcheck.domain.model.check_result import CheckResult
    from castcheck.domain.model.diagnostic import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
                "by_rule": result.by_rule(),
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            "stats": {
                "types_analyzed": result.stats.types_analyzed,
                "candidates_found": result.stats.candidates_found,
                "analyzers_run": result.stats.analyzers_run,
                "cancelled": result.stats.cancelled,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        location = diagnostic.location
        return {
            "rule_id": diagnostic.rule_id,
            "kind": diagnostic.kind.value,
            "severity": diagnostic.severity.name,
            "category": diagnostic.descriptor.category.value,
            "message": diagnostic.message,
            "message_arguments": list(diagnostic.message_arguments),
            "subject": diagnostic.subject,
            "help_link": diagnostic.descriptor.help_link,
            "location": (
                {
                    "file": str(location.file),
                    "line": location.line,
                    "column": location.column,
                }
                if location is not None
                else None
            ),
        }
