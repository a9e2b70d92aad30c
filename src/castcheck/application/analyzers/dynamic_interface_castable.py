"""Dynamic interface castable implementation analyzer.

Checks interfaces marked with DynamicInterfaceCastableImplementationAttribute:
- the declaring language must support default interface members
- every inherited interface member must have a most-specific implementation
- members declared on the interface itself must not be virtual or abstract
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from castcheck.application.analyzers._base import BaseAnalyzer
from castcheck.application.descriptors import (
    DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_UNSUPPORTED,
    INTERFACE_METHODS_MISSING_IMPLEMENTATION,
    METHODS_DECLARED_ON_IMPLEMENTATION_TYPE_MUST_BE_SEALED,
)
from castcheck.domain.model.diagnostic import Diagnostic
from castcheck.domain.resolution import first_unimplemented_member

if TYPE_CHECKING:
    from castcheck.domain.model.analysis_context import SymbolAnalysisContext
    from castcheck.domain.model.type_symbol import TypeSymbol

logger = logging.getLogger(__name__)


def is_castable_implementation(type_symbol: TypeSymbol, marker_attribute: str) -> bool:
    """Check if a type opts into the castable implementation pattern.

    Only interfaces are candidates. The marker is matched by exact
    fully qualified name; unresolved attributes never match.

    Args:
        type_symbol: Type to inspect
        marker_attribute: FQN of the marker attribute class

    Returns:
        True for a marked interface
    """
    if not type_symbol.is_interface:
        return False
    return type_symbol.has_attribute(marker_attribute)


class DynamicInterfaceCastableImplementationAnalyzer(BaseAnalyzer):
    """Validates castable implementation interfaces.

    Stateless: safe to call concurrently for different types.

    Diagnostics:
        CA2250 unsupported-pattern: marked interface in a language without
            default interface members (reported alone, further checks skipped)
        CA2251 incomplete-implementation: at least one inherited member has
            no most-specific implementation (once per type)
        CA2252 member-not-sealed: a member declared on the interface is
            virtual or abstract (once per member)
    """

    supported_diagnostics = (
        DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_UNSUPPORTED,
        INTERFACE_METHODS_MISSING_IMPLEMENTATION,
        METHODS_DECLARED_ON_IMPLEMENTATION_TYPE_MUST_BE_SEALED,
    )

    def analyze_symbol(self, context: SymbolAnalysisContext) -> None:
        """Run the three checks on one named type.

        Args:
            context: Analysis context for the type
        """
        target = context.symbol

        if not is_castable_implementation(target, context.config.marker_attribute):
            return

        if not context.config.supports_default_members(target.language):
            logger.debug(
                "%s: %s cannot declare default interface members",
                target.fqn,
                target.language.value,
            )
            context.report_diagnostic(
                Diagnostic.create(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_UNSUPPORTED, target)
            )
            return

        missing = first_unimplemented_member(target)
        if missing is not None:
            logger.debug("%s: no implementation of %s", target.fqn, missing.key)
            context.report_diagnostic(
                Diagnostic.create(
                    INTERFACE_METHODS_MISSING_IMPLEMENTATION,
                    target,
                    target.display_name,
                )
            )

        for member in target.members:
            if member.is_overridable:
                context.report_diagnostic(
                    Diagnostic.create(
                        METHODS_DECLARED_ON_IMPLEMENTATION_TYPE_MUST_BE_SEALED,
                        member,
                        member.display_name,
                        target.display_name,
                    )
                )
