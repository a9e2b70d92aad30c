"""Domain ports (interfaces/protocols)."""

from castcheck.domain.ports.analyzer import AnalyzerProtocol
from castcheck.domain.ports.diagnostic_sink import DiagnosticSinkProtocol
from castcheck.domain.ports.reporter import ReporterProtocol
from castcheck.domain.ports.symbol_loader import SymbolLoaderProtocol

__all__ = [
    "AnalyzerProtocol",
    "DiagnosticSinkProtocol",
    "ReporterProtocol",
    "SymbolLoaderProtocol",
]
