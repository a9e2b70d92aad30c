"""Named type symbol entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from castcheck.domain.model.enums import TypeKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from castcheck.domain.model.attribute import AttributeData
    from castcheck.domain.model.enums import Language
    from castcheck.domain.model.location import Location
    from castcheck.domain.model.member import MemberSymbol


@dataclass(frozen=True, slots=True)
class TypeSymbol:
    """Declared named type in the program under analysis.

    Read-only snapshot. Direct interfaces and the base type are held as
    symbols, so the whole hierarchy above a type travels with it.

    Attributes:
        name: Simple type name
        namespace: Containing namespace ("" for the global namespace)
        kind: CLASS/INTERFACE/STRUCT/ENUM/DELEGATE
        language: Language the type was declared in
        attributes: Applied attributes
        members: Members declared directly on this type
        interfaces: Directly implemented (or, for interfaces, inherited) interfaces
        base_type: Base class (classes only)
        location: Declaration site (None for metadata types)
        is_generated: Declared in generated code
    """

    name: str
    namespace: str
    kind: TypeKind
    language: Language
    attributes: tuple[AttributeData, ...] = ()
    members: tuple[MemberSymbol, ...] = ()
    interfaces: tuple[TypeSymbol, ...] = ()
    base_type: TypeSymbol | None = None
    location: Location | None = None
    is_generated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("type name must not be empty")
        if "." in self.name:
            raise ValueError(f"type name '{self.name}' must be a simple name")

        for iface in self.interfaces:
            if not iface.is_interface:
                raise ValueError(f"'{iface.fqn}' in interfaces of '{self.fqn}' is not an interface")

        if self.base_type is not None:
            if self.kind is not TypeKind.CLASS:
                raise ValueError(f"only classes have a base type, '{self.fqn}' is {self.kind.value}")
            if self.base_type.kind is not TypeKind.CLASS:
                raise ValueError(f"base type of '{self.fqn}' must be a class")

        for member in self.members:
            if member.owning_type != self.fqn:
                raise ValueError(
                    f"member '{member.name}' is owned by '{member.owning_type}', not '{self.fqn}'"
                )

    @property
    def fqn(self) -> str:
        """Fully qualified name (namespace.Name)."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def display_name(self) -> str:
        """Name used in diagnostic messages."""
        return self.fqn

    @property
    def is_interface(self) -> bool:
        """True for interface types."""
        return self.kind is TypeKind.INTERFACE

    @property
    def all_interfaces(self) -> tuple[TypeSymbol, ...]:
        """Transitive interface closure.

        Interfaces reached directly, through other interfaces and through
        base types. Flattened, deduplicated by FQN, in discovery order.
        Never contains the type itself.

        Time: O(I) where I=interfaces reachable from this type
        """
        seen: dict[str, TypeSymbol] = {}
        for iface in self._walk_interfaces():
            if iface.fqn != self.fqn and iface.fqn not in seen:
                seen[iface.fqn] = iface
        return tuple(seen.values())

    def _walk_interfaces(self) -> Iterator[TypeSymbol]:
        visited: set[str] = {self.fqn}
        stack: list[TypeSymbol] = [self]
        while stack:
            current = stack.pop()
            if current.base_type is not None and current.base_type.fqn not in visited:
                visited.add(current.base_type.fqn)
                stack.append(current.base_type)
            for iface in reversed(current.interfaces):
                if iface.fqn in visited:
                    continue
                visited.add(iface.fqn)
                stack.append(iface)
            if current is not self and current.is_interface:
                yield current

    @property
    def base_types(self) -> tuple[TypeSymbol, ...]:
        """Base class chain, most derived first."""
        chain: list[TypeSymbol] = []
        current = self.base_type
        while current is not None:
            chain.append(current)
            current = current.base_type
        return tuple(chain)

    def inherits_interface(self, fqn: str) -> bool:
        """Check if the interface closure contains the given FQN."""
        return any(iface.fqn == fqn for iface in self.all_interfaces)

    def has_attribute(self, fqn: str) -> bool:
        """Check if an attribute of exactly this class is applied.

        Unresolved attributes are treated as absent.
        """
        return any(attribute.is_class(fqn) for attribute in self.attributes)

    def member(self, signature: str) -> MemberSymbol | None:
        """Find a directly declared member by signature."""
        for member in self.members:
            if member.signature == signature:
                return member
        return None

    def __str__(self) -> str:
        """Format as kind fqn."""
        return f"{self.kind.value} {self.fqn}"
