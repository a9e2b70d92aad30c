"""Per-symbol analysis context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from castcheck.domain.model.configuration import AnalysisConfig
    from castcheck.domain.model.diagnostic import Diagnostic
    from castcheck.domain.model.enums import Language
    from castcheck.domain.model.type_symbol import TypeSymbol


@dataclass(slots=True)
class SymbolAnalysisContext:
    """What an analyzer sees for one named type.

    NOT frozen: collects the diagnostics of a single invocation. One context
    per (analyzer, symbol) call, never shared between threads. The engine
    hands the collected batch to the shared sink after the call returns.

    Attributes:
        symbol: Type being analyzed
        compilation_language: Language of the declaring compilation
        config: Analysis configuration
    """

    symbol: TypeSymbol
    compilation_language: Language
    config: AnalysisConfig
    _reported: list[Diagnostic] = field(default_factory=list)

    def report_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Report a finding for this symbol."""
        self._reported.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics reported so far, in report order."""
        return tuple(self._reported)
