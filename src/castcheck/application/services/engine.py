"""Analysis engine facade.

AnalysisEngine is the primary entry point for running analyzers over a
compilation. Composition-based: accepts analyzers, config and reporter.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self

from castcheck.application.analyzers import (
    analyzers_from_config,
    default_analyzers,
    is_castable_implementation,
)
from castcheck.domain.model.analysis_context import SymbolAnalysisContext
from castcheck.domain.model.check_result import CheckResult
from castcheck.domain.model.check_stats import CheckStats
from castcheck.domain.model.configuration import AnalysisConfig
from castcheck.domain.model.diagnostic_sink import ConcurrentDiagnosticSink
from castcheck.domain.model.enums import SymbolKind

if TYPE_CHECKING:
    import threading

    from castcheck.domain.model.compilation import Compilation
    from castcheck.domain.model.diagnostic import Diagnostic
    from castcheck.domain.model.type_symbol import TypeSymbol
    from castcheck.domain.ports.analyzer import AnalyzerProtocol
    from castcheck.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
    from castcheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Runs analyzers once per declared named type.

    Each type is analyzed independently and statelessly, so types are
    dispatched to a thread pool. The shared sink is the only point of
    contact between invocations.

    Factory methods:
    - with_defaults(): Default analyzers
    - from_config(): Analyzers enabled by AnalysisConfig

    Example:
        compilation = JSONSymbolLoader().load(Path("model.json"))
        engine = AnalysisEngine.with_defaults()
        result = engine.analyze(compilation)
        for diagnostic in result.diagnostics:
            print(diagnostic)
    """

    def __init__(
        self,
        analyzers: Sequence[AnalyzerProtocol] = (),
        *,
        config: AnalysisConfig | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            analyzers: Analyzers to run
            config: Analysis configuration (default config if None)
            reporter: Optional reporter for output
        """
        self._config = config or AnalysisConfig()
        self._analyzers = tuple(
            a for a in analyzers if SymbolKind.NAMED_TYPE in a.supported_symbol_kinds
        )
        self._reporter = reporter

    @classmethod
    def with_defaults(cls, *, reporter: ReporterProtocol | None = None) -> Self:
        """Create engine with default analyzers and default config."""
        return cls(default_analyzers(), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: AnalysisConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create engine with analyzers enabled by config."""
        return cls(analyzers_from_config(config), config=config, reporter=reporter)

    def analyze(
        self,
        compilation: Compilation,
        *,
        sink: DiagnosticSinkProtocol | None = None,
        cancel: threading.Event | None = None,
    ) -> CheckResult:
        """Analyze every declared named type of a compilation.

        Args:
            compilation: Compilation snapshot
            sink: Shared diagnostic sink (fresh ConcurrentDiagnosticSink if None).
                The result holds everything in the sink after the pass.
            cancel: Set to stop the pass between types. A type already
                started always runs to completion.

        Returns:
            CheckResult with sorted diagnostics and stats
        """
        start_time = time.perf_counter()
        sink = sink if sink is not None else ConcurrentDiagnosticSink()

        types = tuple(self._types_to_analyze(compilation))
        logger.info(
            "Analyzing %d type(s) of %s with %d analyzer(s)",
            len(types),
            compilation.assembly_name,
            len(self._analyzers),
        )

        if self._config.is_serial:
            outcomes = [self._run_one(t, compilation, sink, cancel) for t in types]
        else:
            with ThreadPoolExecutor(
                max_workers=self._config.max_workers,
                thread_name_prefix="castcheck",
            ) as executor:
                futures = [
                    executor.submit(self._run_one, t, compilation, sink, cancel) for t in types
                ]
                outcomes = [future.result() for future in futures]

        analyzed = [outcome for outcome in outcomes if outcome is not None]
        diagnostics = tuple(sorted(sink.freeze(), key=lambda d: d.sort_key))

        stats = CheckStats(
            types_analyzed=len(analyzed),
            candidates_found=sum(1 for is_candidate in analyzed if is_candidate),
            analyzers_run=len(self._analyzers),
            analysis_time_ms=(time.perf_counter() - start_time) * 1000,
            cancelled=len(analyzed) < len(types),
        )
        result = CheckResult(diagnostics=diagnostics, stats=stats)

        logger.info(
            "Analysis finished: %d diagnostic(s) in %.1f ms%s",
            result.diagnostic_count,
            stats.analysis_time_ms,
            " (cancelled)" if stats.cancelled else "",
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def analyze_type(
        self,
        type_symbol: TypeSymbol,
        compilation: Compilation,
    ) -> tuple[Diagnostic, ...]:
        """Run every analyzer on one type and return its diagnostics.

        Disabled rules are dropped and severity overrides applied.
        """
        collected: list[Diagnostic] = []
        for analyzer in self._analyzers:
            context = SymbolAnalysisContext(
                symbol=type_symbol,
                compilation_language=compilation.language,
                config=self._config,
            )
            analyzer.analyze_symbol(context)
            collected.extend(context.diagnostics)
        return tuple(self._apply_rule_settings(collected))

    def _types_to_analyze(self, compilation: Compilation) -> list[TypeSymbol]:
        types = list(compilation.named_types())
        if self._config.analyze_generated_code:
            return types
        return [t for t in types if not t.is_generated]

    def _run_one(
        self,
        type_symbol: TypeSymbol,
        compilation: Compilation,
        sink: DiagnosticSinkProtocol,
        cancel: threading.Event | None,
    ) -> bool | None:
        """Analyze one type into the sink.

        Returns:
            None if skipped by cancellation, else whether the type is a candidate
        """
        if cancel is not None and cancel.is_set():
            return None

        logger.debug("Analyzing %s", type_symbol.fqn)
        sink.report_all(self.analyze_type(type_symbol, compilation))
        return is_castable_implementation(type_symbol, self._config.marker_attribute)

    def _apply_rule_settings(self, diagnostics: list[Diagnostic]) -> list[Diagnostic]:
        settled: list[Diagnostic] = []
        for diagnostic in diagnostics:
            if not self._config.is_rule_enabled(diagnostic.rule_id):
                continue
            severity = self._config.severity_for(diagnostic.rule_id, diagnostic.severity)
            if severity is not diagnostic.severity:
                diagnostic = diagnostic.with_severity(severity)
            settled.append(diagnostic)
        return settled

    @property
    def analyzer_count(self) -> int:
        """Number of configured analyzers."""
        return len(self._analyzers)

    @property
    def config(self) -> AnalysisConfig:
        """Active configuration."""
        return self._config
