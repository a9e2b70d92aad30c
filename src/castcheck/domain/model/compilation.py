"""Compilation snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from castcheck.domain.model.enums import Language
    from castcheck.domain.model.type_symbol import TypeSymbol


@dataclass(frozen=True, slots=True)
class Compilation:
    """Declared types of one compilation plus what they reference.

    Attributes:
        assembly_name: Name of the assembly being compiled
        language: Compilation language
        types: Types declared in source (analyzed)
        references: Metadata types (resolvable, never analyzed)
    """

    assembly_name: str
    language: Language
    types: tuple[TypeSymbol, ...]
    references: tuple[TypeSymbol, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.assembly_name:
            raise ValueError("assembly_name must not be empty")

        seen: set[str] = set()
        for type_symbol in (*self.types, *self.references):
            if type_symbol.fqn in seen:
                raise ValueError(f"duplicate type '{type_symbol.fqn}'")
            seen.add(type_symbol.fqn)

    def named_types(self) -> Iterator[TypeSymbol]:
        """Iterate declared types in declaration order."""
        yield from self.types

    def find_type(self, fqn: str) -> TypeSymbol | None:
        """Look up a declared or referenced type by FQN."""
        for type_symbol in (*self.types, *self.references):
            if type_symbol.fqn == fqn:
                return type_symbol
        return None

    @property
    def type_count(self) -> int:
        """Number of declared types."""
        return len(self.types)
