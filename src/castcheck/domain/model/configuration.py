"""Analysis configuration.

User-provided configuration that enables/disables analyzers and rules.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from castcheck.domain.model.enums import Language, Severity

DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE = (
    "System.Runtime.InteropServices.DynamicInterfaceCastableImplementationAttribute"
)
"""Marker attribute opting an interface into the castable implementation pattern."""


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Analysis configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        marker_attribute: FQN of the attribute that marks castable
            implementation interfaces. Compared by exact string match.
        default_member_languages: Languages that can declare default
            interface members. Marked types in other languages are
            reported as unsupported.
        analyze_generated_code: Analyze and report on generated types.
        disabled_rules: Rule ids whose diagnostics are dropped.
        severity_overrides: Rule id → severity replacing the default.
        max_workers: Worker threads for the analysis pass. None = executor
            default, 1 = run inline.
        extras: Arbitrary user data for custom analyzers.
    """

    marker_attribute: str = DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE
    default_member_languages: frozenset[Language] = frozenset({Language.CSHARP})
    analyze_generated_code: bool = True
    disabled_rules: frozenset[str] = frozenset()
    severity_overrides: Mapping[str, Severity] = field(default_factory=dict)
    max_workers: int | None = None
    extras: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.marker_attribute:
            raise ValueError("marker_attribute must not be empty")

        # exact FQN comparison needs namespace + simple name
        if "." not in self.marker_attribute:
            raise ValueError(
                f"marker_attribute must be fully qualified, got '{self.marker_attribute}'"
            )

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

        for rule_id in self.disabled_rules:
            if not rule_id:
                raise ValueError("disabled_rules must not contain empty ids")

        for rule_id, severity in self.severity_overrides.items():
            if not isinstance(severity, Severity):
                raise TypeError(f"severity for '{rule_id}' must be Severity, got {severity!r}")

    def supports_default_members(self, language: Language) -> bool:
        """Check if the language can declare default interface members."""
        return language in self.default_member_languages

    def is_rule_enabled(self, rule_id: str) -> bool:
        """Check if diagnostics of this rule are reported."""
        return rule_id not in self.disabled_rules

    def severity_for(self, rule_id: str, default: Severity) -> Severity:
        """Effective severity of a rule."""
        return self.severity_overrides.get(rule_id, default)

    @property
    def is_serial(self) -> bool:
        """True if the pass runs on the calling thread."""
        return self.max_workers == 1
