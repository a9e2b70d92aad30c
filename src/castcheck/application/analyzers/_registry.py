"""Analyzer registry.

Central registry of all analyzers with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from castcheck.application.analyzers._base import BaseAnalyzer
from castcheck.application.analyzers.dynamic_interface_castable import (
    DynamicInterfaceCastableImplementationAnalyzer,
)
from castcheck.domain.ports.analyzer import AnalyzerProtocol

if TYPE_CHECKING:
    from castcheck.domain.model.configuration import AnalysisConfig


# Registry - tuple for immutability
# Order matters: analyzers run in this order for each type
_ALL_ANALYZERS: tuple[type[BaseAnalyzer], ...] = (
    DynamicInterfaceCastableImplementationAnalyzer,  # Always enabled
)


def default_analyzers() -> tuple[AnalyzerProtocol, ...]:
    """Instantiate analyzers that don't require config.

    Returns:
        Tuple of always-enabled analyzers
    """
    return (DynamicInterfaceCastableImplementationAnalyzer(),)


def analyzers_from_config(config: AnalysisConfig) -> tuple[AnalyzerProtocol, ...]:
    """Instantiate analyzers based on config.

    Analyzers are created using their from_config() factory method.
    If from_config() returns None, the analyzer is disabled.

    Args:
        config: User configuration

    Returns:
        Tuple of enabled analyzers
    """
    analyzers: list[AnalyzerProtocol] = []

    for analyzer_cls in _ALL_ANALYZERS:
        analyzer = analyzer_cls.from_config(config)
        if analyzer is not None:
            analyzers.append(analyzer)

    return tuple(analyzers)
