"""Statistics of an analysis pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from an analysis pass.

    Attributes:
        types_analyzed: Named types handed to analyzers
        candidates_found: Types that opted into the castable implementation pattern
        analyzers_run: Number of analyzers executed per type
        cancelled: Pass stopped before every type was analyzed
        analysis_time_ms: Total analysis time in milliseconds
    """

    types_analyzed: int
    candidates_found: int
    analyzers_run: int
    analysis_time_ms: float
    cancelled: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.types_analyzed < 0:
            raise ValueError(f"types_analyzed must be >= 0, got {self.types_analyzed}")
        if self.candidates_found < 0:
            raise ValueError(f"candidates_found must be >= 0, got {self.candidates_found}")
        if self.candidates_found > self.types_analyzed:
            raise ValueError("candidates_found must not exceed types_analyzed")
        if self.analyzers_run < 0:
            raise ValueError(f"analyzers_run must be >= 0, got {self.analyzers_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(
            types_analyzed=0,
            candidates_found=0,
            analyzers_run=0,
            analysis_time_ms=0.0,
        )
