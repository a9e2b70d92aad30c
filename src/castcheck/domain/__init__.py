"""castcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, threading, collections.abc
"""

from castcheck.domain.exceptions import (
    CastCheckError,
    ConfigError,
    SymbolModelError,
    UnknownRuleError,
)
from castcheck.domain.model import (
    AnalysisConfig,
    AttributeData,
    CheckResult,
    CheckStats,
    Compilation,
    ConcurrentDiagnosticSink,
    Diagnostic,
    DiagnosticDescriptor,
    DiagnosticKind,
    Language,
    Location,
    MemberKind,
    MemberSymbol,
    RuleCategory,
    Severity,
    SymbolAnalysisContext,
    SymbolKind,
    TypeKind,
    TypeSymbol,
)
from castcheck.domain.ports import (
    AnalyzerProtocol,
    DiagnosticSinkProtocol,
    ReporterProtocol,
    SymbolLoaderProtocol,
)
from castcheck.domain.resolution import (
    all_interfaces,
    find_implementation_for_interface_member,
    first_unimplemented_member,
)

__all__ = [
    # Exceptions
    "CastCheckError",
    "SymbolModelError",
    "ConfigError",
    "UnknownRuleError",
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
    # Results
    "Diagnostic",
    "ConcurrentDiagnosticSink",
    "SymbolAnalysisContext",
    "CheckStats",
    "CheckResult",
    "AnalysisConfig",
    # Resolution
    "all_interfaces",
    "find_implementation_for_interface_member",
    "first_unimplemented_member",
    # Ports
    "AnalyzerProtocol",
    "DiagnosticSinkProtocol",
    "ReporterProtocol",
    "SymbolLoaderProtocol",
]
