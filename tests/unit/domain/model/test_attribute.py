"""Tests for domain/model/attribute.py."""

import pytest

from castcheck.domain.model.attribute import AttributeData
from castcheck.domain.model.configuration import (
    DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE,
)


class TestAttributeData:
    """Tests for AttributeData."""

    def test_of_uses_simple_name_for_display(self) -> None:
        attr = AttributeData.of(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)
        assert attr.display_name == "DynamicInterfaceCastableImplementationAttribute"
        assert attr.attribute_class == DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE
        assert attr.is_resolved

    def test_unresolved(self) -> None:
        attr = AttributeData(display_name="DynamicInterfaceCastableImplementation")
        assert not attr.is_resolved

    def test_is_class_exact_match(self) -> None:
        attr = AttributeData.of(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)
        assert attr.is_class(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)

    def test_is_class_rejects_same_simple_name_in_other_namespace(self) -> None:
        attr = AttributeData.of("My.Fake.DynamicInterfaceCastableImplementationAttribute")
        assert not attr.is_class(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)

    def test_is_class_is_case_sensitive(self) -> None:
        attr = AttributeData.of(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE.lower())
        assert not attr.is_class(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)

    def test_unresolved_never_matches(self) -> None:
        attr = AttributeData(display_name="DynamicInterfaceCastableImplementationAttribute")
        assert not attr.is_class(DYNAMIC_INTERFACE_CASTABLE_IMPLEMENTATION_ATTRIBUTE)

    def test_empty_display_name_raises(self) -> None:
        with pytest.raises(ValueError, match="display_name"):
            AttributeData(display_name="")

    def test_empty_class_raises(self) -> None:
        with pytest.raises(ValueError, match="attribute_class"):
            AttributeData(display_name="X", attribute_class="")
