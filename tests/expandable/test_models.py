"""Tests for expandable reference models."""

from typing import Optional

import pytest

from stripe_bindings.expandable import APIResource, Expandable, Full, Identifier


class Widget(APIResource):
    name: str = ""
    size: int = 0


class Box(APIResource):
    widget: Expandable[Widget] = None
    spare: Optional[Widget] = None


class TestAPIResource:
    def test_from_identifier(self):
        """Should build an unexpanded resource with defaults."""
        widget = Widget.from_identifier("wid_1")
        assert widget.id == "wid_1"
        assert widget.name == ""
        assert widget.size == 0
        assert widget.is_expanded is False

    def test_constructed_resource_is_expanded(self):
        """Directly constructed resources count as expanded."""
        assert Widget(id="wid_1", name="bolt").is_expanded is True

    def test_identifier_and_object_not_equal(self):
        """An id-only resource differs from an object carrying only the id."""
        assert Widget.from_identifier("wid_1") != Widget(id="wid_1")

    def test_validate_accepts_string(self):
        """model_validate should accept the identifier form."""
        widget = Widget.model_validate("wid_1")
        assert widget == Widget.from_identifier("wid_1")

    def test_nested_string_accepted(self):
        """Any nested resource should accept the identifier form."""
        box = Box.model_validate({"id": "box_1", "widget": "wid_1", "spare": "wid_2"})
        assert box.widget.id == "wid_1"
        assert box.spare.id == "wid_2"
        assert box.spare.is_expanded is False

    def test_dump_unexpanded(self):
        """An unexpanded resource should dump as its identifier."""
        assert Widget.from_identifier("wid_1").model_dump() == "wid_1"

    def test_dump_expanded(self):
        """An expanded resource should dump all attributes."""
        dumped = Widget(id="wid_1", name="bolt", size=3).model_dump()
        assert dumped == {"id": "wid_1", "object": None, "name": "bolt", "size": 3}

    def test_expandable_fields(self):
        """Only fields annotated Expandable should be listed."""
        assert Box.expandable_fields() == ["widget"]
        assert Widget.expandable_fields() == []

    def test_extra_fields_ignored(self):
        """Unknown fields should be dropped."""
        widget = Widget.model_validate({"id": "wid_1", "colour": "red"})
        assert widget.model_dump() == {"id": "wid_1", "object": None, "name": "", "size": 0}


class TestReferenceVariants:
    def test_identifier(self):
        """Identifier should carry the id."""
        assert Identifier("wid_1").id == "wid_1"

    def test_full_exposes_resource_id(self):
        """Full.id should come from the wrapped resource."""
        reference = Full(Widget(id="wid_1"))
        assert reference.id == "wid_1"

    def test_variants_are_frozen(self):
        """Reference variants should be immutable."""
        reference = Identifier("wid_1")
        with pytest.raises(AttributeError):
            reference.id = "other"
