"""Diagnostic sink protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from castcheck.domain.model.diagnostic import Diagnostic


class DiagnosticSinkProtocol(Protocol):
    """Append-only destination for diagnostics.

    Must accept concurrent submissions from several analysis invocations
    without loss and without interleaving one batch into another.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Append one diagnostic."""
        ...

    def report_all(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append a batch of diagnostics atomically."""
        ...

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Snapshot of everything reported so far."""
        ...
