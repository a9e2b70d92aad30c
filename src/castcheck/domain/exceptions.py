"""Domain exceptions: all public errors of castcheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from pathlib import Path


class CastCheckError(Exception):
    """Base for all castcheck error exceptions.

    Allows: except CastCheckError to catch all library errors.
    """


class SymbolModelError(CastCheckError, ValueError):
    """Symbol model document is malformed or inconsistent.

    FAIL-FIRST: raised while loading, never during analysis.
    Inherits ValueError for semantic correctness.

    Attributes:
        source: Document the model was read from.
        reason: Error description.
    """

    def __init__(self, *, source: Path | str, reason: str) -> None:
        """Initialize with document source and error reason."""
        if not reason:
            raise ValueError("reason must be non-empty string")
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class ConfigError(CastCheckError, ValueError):
    """Configuration value is invalid.

    Attributes:
        key: Offending configuration key.
        reason: Why the value is invalid.
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with key and reason."""
        if not key:
            raise ValueError("key must not be empty")
        self.key = key
        self.reason = reason
        super().__init__(f"invalid config '{key}': {reason}")


class UnknownRuleError(CastCheckError, KeyError):
    """Rule id has no descriptor.

    Attributes:
        rule_id: Requested rule id.
    """

    def __init__(self, rule_id: str) -> None:
        """Initialize with rule id."""
        self.rule_id = rule_id
        super().__init__(f"unknown rule id {rule_id!r}")

    def __str__(self) -> str:
        """KeyError quotes its argument; keep the plain message."""
        return str(self.args[0])
