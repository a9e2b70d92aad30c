"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from castcheck.domain.model.check_stats import CheckStats
from castcheck.domain.model.diagnostic import Diagnostic
from castcheck.domain.model.enums import DiagnosticKind, Severity


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of an analysis pass.

    Immutable aggregate handed to ReporterProtocol.report().

    Attributes:
        diagnostics: All reported diagnostics, sorted by Diagnostic.sort_key
        stats: Analysis statistics
    """

    diagnostics: tuple[Diagnostic, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """True if nothing has ERROR severity."""
        return self.error_count == 0

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        """Diagnostics of one kind."""
        return tuple(d for d in self.diagnostics if d.kind is kind)

    def by_rule(self) -> dict[str, int]:
        """Rule id → diagnostic count."""
        counts: dict[str, int] = {}
        for diagnostic in self.diagnostics:
            counts[diagnostic.rule_id] = counts.get(diagnostic.rule_id, 0) + 1
        return counts

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no diagnostics)."""
        return cls(diagnostics=(), stats=CheckStats.empty())
