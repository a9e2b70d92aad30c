"""Application services."""

from castcheck.application.services.engine import AnalysisEngine

__all__ = ["AnalysisEngine"]
