"""Domain model entities."""

from castcheck.domain.model.analysis_context import SymbolAnalysisContext
from castcheck.domain.model.attribute import AttributeData
from castcheck.domain.model.check_result import CheckResult
from castcheck.domain.model.check_stats import CheckStats
from castcheck.domain.model.compilation import Compilation
from castcheck.domain.model.configuration import (
    DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE,
    AnalysisConfig,
)
from castcheck.domain.model.descriptor import DiagnosticDescriptor
from castcheck.domain.model.diagnostic import Diagnostic
from castcheck.domain.model.diagnostic_sink import ConcurrentDiagnosticSink
from castcheck.domain.model.enums import (
    DiagnosticKind,
    Language,
    MemberKind,
    RuleCategory,
    Severity,
    SymbolKind,
    TypeKind,
)
from castcheck.domain.model.location import Location
from castcheck.domain.model.member import MemberSymbol
from castcheck.domain.model.type_symbol import TypeSymbol

__all__ = [
    # Enums
    "Severity",
    "RuleCategory",
    "Language",
    "TypeKind",
    "MemberKind",
    "SymbolKind",
    "DiagnosticKind",
    # Value objects
    "Location",
    "AttributeData",
    "DiagnosticDescriptor",
    # Symbols
    "MemberSymbol",
    "TypeSymbol",
    "Compilation",
    "SymbolAnalysisContext",
    # Results
    "Diagnostic",
    "ConcurrentDiagnosticSink",
    "CheckStats",
    "CheckResult",
    # Configuration
    "AnalysisConfig",
    "DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE",
]
