"""Diagnostic descriptor table.

Immutable lookup built once at import. Analyzers reference descriptors,
they never build them.
"""

from __future__ import annotations

from types import MappingProxyType

from castcheck.domain.exceptions import UnknownRuleError
from castcheck.domain.model.descriptor import DiagnosticDescriptor
from castcheck.domain.model.enums import DiagnosticKind, RuleCategory, Severity

_HELP_ROOT = "https://learn.microsoft.com/dotnet/fundamentals/code-analysis/quality-rules"

DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_UNSUPPORTED = DiagnosticDescriptor(
    id="CA2250",
    kind=DiagnosticKind.UNSUPPORTED_PATTERN,
    title="Providing a 'DynamicInterfaceCastableImplementation' interface in Visual Basic is unsupported",
    message_format=(
        "Providing a functional 'DynamicInterfaceCastableImplementationAttribute'-attributed "
        "interface requires the Default Interface Members feature, which is unsupported in "
        "Visual Basic"
    ),
    category=RuleCategory.USAGE,
    default_severity=Severity.WARNING,
    description=(
        "Types attributed with 'DynamicInterfaceCastableImplementationAttribute' act as an "
        "interface implementation for a type that implements the 'IDynamicInterfaceCastable' "
        "type. As a result, it must provide an implementation of all of the members defined "
        "in the inherited interfaces, because the type that implements "
        "'IDynamicInterfaceCastable' will not provide them otherwise."
    ),
    help_link=f"{_HELP_ROOT}/ca2250",
)

INTERFACE_METHODS_MISSING_IMPLEMENTATION = DiagnosticDescriptor(
    id="CA2251",
    kind=DiagnosticKind.INCOMPLETE_IMPLEMENTATION,
    title=(
        "All members declared in parent interfaces must have an implementation in a "
        "DynamicInterfaceCastableImplementation-attributed interface"
    ),
    message_format=(
        "The '{0}' interface has the 'DynamicInterfaceCastableImplementationAttribute' "
        "applied but does not provide an implementation of every member of its parent "
        "interfaces"
    ),
    category=RuleCategory.USAGE,
    default_severity=Severity.WARNING,
    description=(
        "Types attributed with 'DynamicInterfaceCastableImplementationAttribute' act as an "
        "interface implementation for a type that implements the 'IDynamicInterfaceCastable' "
        "type. As a result, it must provide an implementation of all of the members defined "
        "in the inherited interfaces."
    ),
    help_link=f"{_HELP_ROOT}/ca2251",
)

METHODS_DECLARED_ON_IMPLEMENTATION_TYPE_MUST_BE_SEALED = DiagnosticDescriptor(
    id="CA2252",
    kind=DiagnosticKind.MEMBER_NOT_SEALED,
    title=(
        "Members defined on an interface with the 'DynamicInterfaceCastableImplementationAttribute' "
        "should be sealed"
    ),
    message_format=(
        "The '{0}' member on the '{1}' type should be marked 'sealed' as '{1}' has the "
        "'DynamicInterfaceCastableImplementationAttribute' applied"
    ),
    category=RuleCategory.USAGE,
    default_severity=Severity.WARNING,
    description=(
        "Since a type that implements 'IDynamicInterfaceCastable' may not implement a dynamic "
        "interface in metadata, calls to an instance interface member that is not an explicit "
        "implementation defined on this type are likely to fail at runtime. Mark new interface "
        "members 'sealed' to avoid runtime errors."
    ),
    help_link=f"{_HELP_ROOT}/ca2252",
)

DESCRIPTORS: MappingProxyType[DiagnosticKind, DiagnosticDescriptor] = MappingProxyType(
    {
        descriptor.kind: descriptor
        for descriptor in (
            DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_UNSUPPORTED,
            INTERFACE_METHODS_MISSING_IMPLEMENTATION,
            METHODS_DECLARED_ON_IMPLEMENTATION_TYPE_MUST_BE_SEALED,
        )
    }
)

_BY_ID: MappingProxyType[str, DiagnosticDescriptor] = MappingProxyType(
    {descriptor.id: descriptor for descriptor in DESCRIPTORS.values()}
)


def descriptor_for(kind: DiagnosticKind) -> DiagnosticDescriptor:
    """Descriptor of a diagnostic kind."""
    return DESCRIPTORS[kind]


def descriptor_by_id(rule_id: str) -> DiagnosticDescriptor:
    """Descriptor of a rule id.

    Raises:
        UnknownRuleError: If no descriptor has this id
    """
    try:
        return _BY_ID[rule_id]
    except KeyError:
        raise UnknownRuleError(rule_id) from None


def known_rule_ids() -> frozenset[str]:
    """Every rule id in the table."""
    return frozenset(_BY_ID)
