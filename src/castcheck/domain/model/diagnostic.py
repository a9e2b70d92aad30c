"""Reported finding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from castcheck.domain.model.descriptor import DiagnosticDescriptor
    from castcheck.domain.model.enums import DiagnosticKind, Severity
    from castcheck.domain.model.location import Location
    from castcheck.domain.model.member import MemberSymbol
    from castcheck.domain.model.type_symbol import TypeSymbol


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Finding reported by an analyzer.

    The location is always the triggering symbol's declaration site:
    the type for type-level findings, the member for member-level ones.

    Attributes:
        descriptor: Rule metadata
        symbol: Symbol that triggered the finding
        message_arguments: Display strings interpolated into the template
        severity: Effective severity (descriptor default unless remapped)
    """

    descriptor: DiagnosticDescriptor
    symbol: TypeSymbol | MemberSymbol
    message_arguments: tuple[str, ...]
    severity: Severity

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.symbol is None:
            raise TypeError("symbol must not be None")
        # fails on missing arguments rather than at report time
        self.descriptor.format_message(self.message_arguments)

    @classmethod
    def create(
        cls,
        descriptor: DiagnosticDescriptor,
        symbol: TypeSymbol | MemberSymbol,
        *message_arguments: str,
    ) -> Diagnostic:
        """Create a diagnostic with the descriptor's default severity."""
        return cls(
            descriptor=descriptor,
            symbol=symbol,
            message_arguments=message_arguments,
            severity=descriptor.default_severity,
        )

    @property
    def rule_id(self) -> str:
        """Rule identifier."""
        return self.descriptor.id

    @property
    def kind(self) -> DiagnosticKind:
        """Stable kind identifier."""
        return self.descriptor.kind

    @property
    def location(self) -> Location | None:
        """Declaration site of the triggering symbol."""
        return self.symbol.location

    @property
    def subject(self) -> str:
        """Display name of the triggering symbol."""
        return self.symbol.display_name

    @property
    def message(self) -> str:
        """Formatted message."""
        return self.descriptor.format_message(self.message_arguments)

    @property
    def sort_key(self) -> tuple[str, int, int, str, str]:
        """Deterministic ordering: file, line, column, rule id, subject."""
        loc = self.location
        if loc is None:
            return ("", 0, 0, self.rule_id, self.subject)
        return (str(loc.file), loc.line, loc.column, self.rule_id, self.subject)

    def with_severity(self, severity: Severity) -> Diagnostic:
        """Copy with another severity."""
        return Diagnostic(
            descriptor=self.descriptor,
            symbol=self.symbol,
            message_arguments=self.message_arguments,
            severity=severity,
        )

    def __str__(self) -> str:
        """Format diagnostic for display."""
        where = str(self.location) if self.location is not None else "<metadata>"
        return f"{where}: {self.severity.name.lower()} {self.rule_id}: {self.message}"
