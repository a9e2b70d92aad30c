"""Analyzer protocol for symbol analyzers.

Users extend castcheck by implementing this Protocol.
Analyzers receive one symbol at a time and report through the context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from castcheck.domain.model.analysis_context import SymbolAnalysisContext
    from castcheck.domain.model.configuration import AnalysisConfig
    from castcheck.domain.model.descriptor import DiagnosticDescriptor
    from castcheck.domain.model.enums import SymbolKind


class AnalyzerProtocol(Protocol):
    """Contract for analyzers.

    Analyzers are stateless: the engine may call analyze_symbol() for
    different symbols concurrently from several threads.

    Key pattern: from_config() returns None if analyzer should be disabled.
    """

    supported_symbol_kinds: frozenset[SymbolKind]
    """Symbol events this analyzer registers for."""

    @property
    def supported_diagnostics(self) -> tuple[DiagnosticDescriptor, ...]:
        """Descriptors of every diagnostic this analyzer can report."""
        ...

    def analyze_symbol(self, context: SymbolAnalysisContext) -> None:
        """Analyze one symbol and report diagnostics through the context.

        Args:
            context: Symbol, compilation language, config and sink
        """
        ...

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> Self | None:
        """Create analyzer from config, None if disabled."""
        ...
