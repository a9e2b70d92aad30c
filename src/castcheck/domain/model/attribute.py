"""Applied attribute value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AttributeData:
    """Attribute applied to a type.

    Attributes:
        display_name: Attribute name as written at the application site
        attribute_class: Fully qualified name of the attribute class.
            None when the reference could not be resolved.
    """

    display_name: str
    attribute_class: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.display_name:
            raise ValueError("display_name must not be empty")
        if self.attribute_class is not None and not self.attribute_class:
            raise ValueError("attribute_class must be None or non-empty")

    @property
    def is_resolved(self) -> bool:
        """True if the attribute class is known."""
        return self.attribute_class is not None

    def is_class(self, fqn: str) -> bool:
        """Check if this attribute's class is exactly the given FQN.

        Unresolved attributes never match.

        Args:
            fqn: Fully qualified attribute class name

        Returns:
            True on exact match
        """
        return self.attribute_class is not None and self.attribute_class == fqn

    @classmethod
    def of(cls, fqn: str) -> AttributeData:
        """Create a resolved attribute from its class FQN."""
        return cls(display_name=fqn.rsplit(".", 1)[-1], attribute_class=fqn)
