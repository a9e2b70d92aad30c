"""Application layer for castcheck.

Components:
- analyzers: Symbol analyzers (castable implementation rule)
- descriptors: Diagnostic descriptor table
- reporters: Output formatting (PlainText, JSON, Console)
- services: Main facade (AnalysisEngine)
"""

from castcheck.application.analyzers import (
    BaseAnalyzer,
    DynamicInterfaceCastableImplementationAnalyzer,
    analyzers_from_config,
    default_analyzers,
    is_castable_implementation,
)
from castcheck.application.descriptors import (
    DESCRIPTORS,
    descriptor_by_id,
    descriptor_for,
    known_rule_ids,
)
from castcheck.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from castcheck.application.services import AnalysisEngine

__all__ = [
    # Analyzers
    "BaseAnalyzer",
    "DynamicInterfaceCastableImplementationAnalyzer",
    "is_castable_implementation",
    "default_analyzers",
    "analyzers_from_config",
    # Descriptors
    "DESCRIPTORS",
    "descriptor_for",
    "descriptor_by_id",
    "known_rule_ids",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    # Services
    "AnalysisEngine",
]
