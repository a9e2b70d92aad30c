"""castcheck - declaration checks for dynamic interface castable implementations."""

__version__ = "0.1.0"

from castcheck.application.services import AnalysisEngine
from castcheck.domain.model import AnalysisConfig, CheckResult, Compilation, Diagnostic

__all__ = [
    "AnalysisConfig",
    "AnalysisEngine",
    "CheckResult",
    "Compilation",
    "Diagnostic",
    "__version__",
]
