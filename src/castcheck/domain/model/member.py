"""Member symbol entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from castcheck.domain.model.enums import MemberKind

if TYPE_CHECKING:
    from castcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class MemberSymbol:
    """Method, property or event declared on a type.

    Members refer to their owner by FQN so that type snapshots stay acyclic.

    Attributes:
        name: Member name
        owning_type: FQN of the declaring type
        kind: METHOD/PROPERTY/EVENT
        parameters: Parameter type display strings (methods only)
        is_static: Member belongs to the type, not to instances
        is_virtual: Member is open for overriding
        is_abstract: Member has no body
        is_sealed: Member is explicitly closed for overriding
        explicit_implementations: Keys of interface members this member
            explicitly implements or overrides
        location: Declaration site (None for metadata members)
    """

    name: str
    owning_type: str
    kind: MemberKind = MemberKind.METHOD
    parameters: tuple[str, ...] = ()
    is_static: bool = False
    is_virtual: bool = False
    is_abstract: bool = False
    is_sealed: bool = False
    explicit_implementations: frozenset[str] = frozenset()
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if not self.owning_type:
            raise ValueError("owning_type must not be empty")
        if self.is_sealed and self.is_abstract:
            raise ValueError(f"member '{self.name}' cannot be both sealed and abstract")
        if self.is_sealed and self.is_static:
            raise ValueError(f"static member '{self.name}' cannot be sealed")
        if self.parameters and self.kind is MemberKind.EVENT:
            raise ValueError(f"event '{self.name}' cannot have parameters")
        if self.key in self.explicit_implementations:
            raise ValueError(f"member '{self.key}' cannot implement itself")

    @property
    def signature(self) -> str:
        """Name plus parameter list for methods, plain name otherwise."""
        if self.kind is MemberKind.METHOD:
            return f"{self.name}({', '.join(self.parameters)})"
        if self.parameters:  # indexer
            return f"{self.name}[{', '.join(self.parameters)}]"
        return self.name

    @property
    def key(self) -> str:
        """Identity of the member across the symbol model."""
        return f"{self.owning_type}.{self.signature}"

    @property
    def display_name(self) -> str:
        """Name used in diagnostic messages."""
        return self.key

    @property
    def has_body(self) -> bool:
        """True if the member carries an implementation."""
        return not self.is_abstract

    @property
    def is_overridable(self) -> bool:
        """True if a derived type could still override this member."""
        return self.is_virtual or self.is_abstract

    def implements(self, member: MemberSymbol) -> bool:
        """Check if this member explicitly implements the given member."""
        return member.key in self.explicit_implementations

    def matches_signature(self, member: MemberSymbol) -> bool:
        """Check if this member could implicitly implement the given member."""
        return self.kind is member.kind and self.signature == member.signature

    def __str__(self) -> str:
        """Format as key."""
        return self.key
