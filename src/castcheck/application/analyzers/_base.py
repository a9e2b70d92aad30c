"""Base analyzer class for symbol analyzers.

Provides default implementation of AnalyzerProtocol.
Concrete analyzers inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from castcheck.domain.model.enums import SymbolKind

if TYPE_CHECKING:
    from castcheck.domain.model.analysis_context import SymbolAnalysisContext
    from castcheck.domain.model.configuration import AnalysisConfig
    from castcheck.domain.model.descriptor import DiagnosticDescriptor


class BaseAnalyzer(ABC):
    """Base class for analyzers implementing AnalyzerProtocol.

    Concrete analyzers must:
    1. List their descriptors in `supported_diagnostics`
    2. Implement `analyze_symbol()`
    3. Optionally override `from_config()` for conditional activation

    Example:
        class MyAnalyzer(BaseAnalyzer):
            supported_diagnostics = (MY_DESCRIPTOR,)

            def analyze_symbol(self, context: SymbolAnalysisContext) -> None:
                if context.symbol.name.startswith("_"):
                    context.report_diagnostic(
                        Diagnostic.create(MY_DESCRIPTOR, context.symbol)
                    )
    """

    supported_symbol_kinds: frozenset[SymbolKind] = frozenset({SymbolKind.NAMED_TYPE})
    """Symbol events this analyzer registers for."""

    supported_diagnostics: tuple[DiagnosticDescriptor, ...] = ()
    """Descriptors of every diagnostic this analyzer can report."""

    @abstractmethod
    def analyze_symbol(self, context: SymbolAnalysisContext) -> None:
        """Analyze one symbol and report through the context.

        Args:
            context: Symbol, language, config and report_diagnostic()
        """

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> Self | None:
        """Create analyzer from config.

        Default: enabled unless every rule it reports is disabled.

        Args:
            config: User configuration

        Returns:
            Analyzer instance if enabled, None if disabled
        """
        rule_ids = [descriptor.id for descriptor in cls.supported_diagnostics]
        if rule_ids and not any(config.is_rule_enabled(rule_id) for rule_id in rule_ids):
            return None
        return cls()

    @property
    def name(self) -> str:
        """Analyzer name for logs and stats."""
        return type(self).__name__
