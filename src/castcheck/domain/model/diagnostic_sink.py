"""Thread-safe diagnostic sink.

Implements DiagnosticSinkProtocol for the analysis pass.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from castcheck.domain.model.diagnostic import Diagnostic


@dataclass(slots=True)
class ConcurrentDiagnosticSink:
    """Append-only multi-producer diagnostic collector.

    Used during the analysis pass. Mutable, thread-safe.
    Call freeze() to get an immutable snapshot.

    NOT frozen because it's a mutable collector.
    Thread-safety via Lock.
    """

    _diagnostics: list[Diagnostic] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def report(self, diagnostic: Diagnostic) -> None:
        """Append one diagnostic. Thread-safe."""
        with self._lock:
            self._diagnostics.append(diagnostic)

    def report_all(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append a batch in one critical section. Thread-safe.

        Batches from different producers never interleave.
        """
        batch = list(diagnostics)
        if not batch:
            return
        with self._lock:
            self._diagnostics.extend(batch)

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Create immutable snapshot in report order. Thread-safe."""
        with self._lock:
            return tuple(self._diagnostics)

    @property
    def count(self) -> int:
        """Current number of diagnostics. Thread-safe."""
        with self._lock:
            return len(self._diagnostics)
