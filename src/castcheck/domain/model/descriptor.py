"""Diagnostic descriptor value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from castcheck.domain.model.enums import DiagnosticKind, RuleCategory, Severity


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """Static metadata of one rule.

    Attributes:
        id: Rule identifier (e.g. CA2250)
        kind: Stable kind identifier
        title: Short title
        message_format: Message template with positional {0} placeholders
        category: Rule category
        default_severity: Severity unless overridden by config
        description: Long description
        help_link: Documentation URL
    """

    id: str
    kind: DiagnosticKind
    title: str
    message_format: str
    category: RuleCategory
    default_severity: Severity
    description: str = ""
    help_link: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.title:
            raise ValueError("title must not be empty")
        if not self.message_format:
            raise ValueError("message_format must not be empty")

    def format_message(self, arguments: tuple[str, ...]) -> str:
        """Interpolate arguments into the message template.

        Raises:
            IndexError: If the template needs more arguments than given
        """
        return self.message_format.format(*arguments)
