"""Symbol loader port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from castcheck.domain.model.compilation import Compilation


class SymbolLoaderProtocol(Protocol):
    """Produces compilation snapshots for the engine."""

    def load(self, path: Path) -> Compilation:
        """Load a compilation snapshot.

        Raises:
            SymbolModelError: If the document is malformed
        """
        ...
