"""Tests for analyzers/_registry.py and analyzers/_base.py."""

from castcheck.application.analyzers import (
    BaseAnalyzer,
    DynamicInterfaceCastableImplementationAnalyzer,
    analyzers_from_config,
    default_analyzers,
)
from castcheck.domain.model.analysis_context import SymbolAnalysisContext
from castcheck.domain.model.configuration import AnalysisConfig
from castcheck.domain.model.enums import SymbolKind
from castcheck.domain.ports.analyzer import AnalyzerProtocol


class _SilentAnalyzer(BaseAnalyzer):
    def analyze_symbol(self, context: SymbolAnalysisContext) -> None:
        return None


class TestDefaultAnalyzers:
    """Tests for default_analyzers()."""

    def test_contains_castable_analyzer(self) -> None:
        (analyzer,) = default_analyzers()
        assert isinstance(analyzer, DynamicInterfaceCastableImplementationAnalyzer)

    def test_satisfies_protocol(self) -> None:
        analyzers: tuple[AnalyzerProtocol, ...] = default_analyzers()
        for analyzer in analyzers:
            assert callable(analyzer.analyze_symbol)
            assert analyzer.supported_diagnostics

    def test_registers_for_named_types(self) -> None:
        for analyzer in default_analyzers():
            assert SymbolKind.NAMED_TYPE in analyzer.supported_symbol_kinds


class TestAnalyzersFromConfig:
    """Tests for analyzers_from_config()."""

    def test_default_config(self) -> None:
        assert len(analyzers_from_config(AnalysisConfig())) == 1

    def test_partially_disabled_keeps_analyzer(self) -> None:
        config = AnalysisConfig(disabled_rules=frozenset({"CA2250", "CA2251"}))
        assert len(analyzers_from_config(config)) == 1

    def test_all_rules_disabled_drops_analyzer(self) -> None:
        config = AnalysisConfig(disabled_rules=frozenset({"CA2250", "CA2251", "CA2252"}))
        assert analyzers_from_config(config) == ()


class TestBaseAnalyzer:
    """Tests for BaseAnalyzer defaults."""

    def test_analyzer_without_descriptors_always_enabled(self) -> None:
        config = AnalysisConfig(disabled_rules=frozenset({"CA2250", "CA2251", "CA2252"}))
        assert isinstance(_SilentAnalyzer.from_config(config), _SilentAnalyzer)

    def test_name(self) -> None:
        assert _SilentAnalyzer().name == "_SilentAnalyzer"
