"""Most-specific implementation resolution for interface members.

Pure functions over TypeSymbol snapshots. Given a member declared on an
interface, find the member that would execute when dispatching through a
type: class members first (explicit, then implicit, most derived class
first), then default interface members, keeping only the most specific.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from castcheck.domain.model.member import MemberSymbol
    from castcheck.domain.model.type_symbol import TypeSymbol


def all_interfaces(type_symbol: TypeSymbol) -> tuple[TypeSymbol, ...]:
    """Transitive interface closure of a type, without the type itself."""
    return type_symbol.all_interfaces


def find_implementation_for_interface_member(
    type_symbol: TypeSymbol,
    member: MemberSymbol,
) -> MemberSymbol | None:
    """Resolve the most-specific implementation of an interface member.

    Args:
        type_symbol: Type dispatched through
        member: Non-static member declared on an interface in the closure of
            type_symbol (or on type_symbol itself)

    Returns:
        Implementing member, or None if nothing implements it, the most
        specific candidate is a re-abstraction, or candidates are ambiguous
    """
    if member.is_static:
        return None

    if not type_symbol.is_interface:
        class_impl = _find_class_implementation(type_symbol, member)
        if class_impl is not None:
            return class_impl

    return _find_default_implementation(type_symbol, member)


def _find_class_implementation(
    type_symbol: TypeSymbol,
    member: MemberSymbol,
) -> MemberSymbol | None:
    """Walk the class chain, most derived first."""
    for klass in (type_symbol, *type_symbol.base_types):
        for candidate in klass.members:
            if candidate.implements(member):
                return candidate
        for candidate in klass.members:
            if not candidate.is_static and candidate.matches_signature(member):
                return candidate
    return None


def _find_default_implementation(
    type_symbol: TypeSymbol,
    member: MemberSymbol,
) -> MemberSymbol | None:
    """Pick the unique most-specific default interface member."""
    closure = type_symbol.all_interfaces
    scope = (type_symbol, *closure) if type_symbol.is_interface else closure

    candidates: dict[str, tuple[TypeSymbol, MemberSymbol]] = {}
    for iface in scope:
        if iface.fqn == member.owning_type and member.has_body:
            candidates[iface.fqn] = (iface, member)
            continue
        for declared in iface.members:
            if declared.implements(member):
                candidates[iface.fqn] = (iface, declared)
                break

    most_specific = [
        (iface, impl)
        for iface, impl in candidates.values()
        if not any(
            other.fqn != iface.fqn and other.inherits_interface(iface.fqn)
            for other, _ in candidates.values()
        )
    ]

    if len(most_specific) != 1:
        return None

    _, impl = most_specific[0]
    if impl.is_abstract:  # re-abstraction
        return None
    return impl


def first_unimplemented_member(type_symbol: TypeSymbol) -> MemberSymbol | None:
    """First non-static inherited member with no reachable implementation.

    Static members are skipped: dispatch never routes through them.

    Args:
        type_symbol: Type whose interface closure is checked

    Returns:
        First unresolved member in closure order, or None if complete
    """
    for iface in all_interfaces(type_symbol):
        for member in iface.members:
            if member.is_static:
                continue
            if find_implementation_for_interface_member(type_symbol, member) is None:
                return member
    return None
