"""Symbol analyzers.

Analyzers inspect one named type at a time:
- DynamicInterfaceCastableImplementationAnalyzer: castable implementation interfaces
"""

from castcheck.application.analyzers._base import BaseAnalyzer
from castcheck.application.analyzers._registry import (
    analyzers_from_config,
    default_analyzers,
)
from castcheck.application.analyzers.dynamic_interface_castable import (
    DynamicInterfaceCastableImplementationAnalyzer,
    is_castable_implementation,
)

__all__ = [
    # Base
    "BaseAnalyzer",
    # Analyzers
    "DynamicInterfaceCastableImplementationAnalyzer",
    "is_castable_implementation",
    # Factory functions
    "default_analyzers",
    "analyzers_from_config",
]
