"""Tests for ItemGroupValidator."""
import pytest

from src.schema.models import AttributeSpec, ItemGroupRequest, ItemGroupSpec, OptionSpec
from src.validator.item_group_validator import (
    ItemGroupValidator,
    ValidationError,
    validate_item_group,
)


def make_request(*attributes, name="Widgets"):
    """Build a request around the given attributes."""
    return ItemGroupRequest(ItemGroupSpec(name=name, attributes=list(attributes)))


_DEFAULT = object()


def color(order=0, options=_DEFAULT):
    """A valid Color attribute unless overridden; options=None is kept as None."""
    if options is _DEFAULT:
        options = [OptionSpec("Red", 0)]
    return AttributeSpec("Color", order, options)


class TestGroupRules:
    """Group-level rules."""

    def test_missing_group_spec(self):
        with pytest.raises(ValidationError) as exc:
            ItemGroupValidator().validate(ItemGroupRequest())

        assert str(exc.value) == "group spec must be defined"
        assert exc.value.path == ()

    def test_empty_name(self):
        with pytest.raises(ValidationError, match="^Name is required$"):
            validate_item_group(make_request(color(), name=""))

    def test_none_name(self):
        with pytest.raises(ValidationError, match="^Name is required$"):
            validate_item_group(make_request(color(), name=None))

    def test_no_attributes(self):
        with pytest.raises(ValidationError) as exc:
            validate_item_group(make_request())

        assert exc.value.message == "At least one attribute is required"
        assert exc.value.attribute_index is None

    def test_name_checked_before_attributes(self):
        """First failure wins."""
        with pytest.raises(ValidationError, match="Name is required"):
            validate_item_group(make_request(name=""))

    def test_valid_request(self):
        validate_item_group(make_request(color()))


class TestAttributeRules:
    """Attribute-level rules carry the attribute index."""

    def test_attribute_name_required(self):
        request = make_request(color(), AttributeSpec("", 1, [OptionSpec("S", 0)]))

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert str(exc.value) == "Group attribute at index 1 - Name is required."
        assert exc.value.attribute_index == 1
        assert exc.value.path == (1,)

    def test_attribute_order_required(self):
        request = make_request(color(), color(), AttributeSpec("Size", None, [OptionSpec("S", 0)]))

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert str(exc.value) == "Group attribute at index 2 - Order is required."
        assert exc.value.attribute_index == 2

    def test_zero_order_is_valid(self):
        validate_item_group(make_request(AttributeSpec("Color", 0, [OptionSpec("Red", 0)])))

    @pytest.mark.parametrize("options", [[], None])
    def test_options_required(self, options):
        request = make_request(color(), color(options=options))

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert str(exc.value) == "Group attribute at index 1 - At least one option is required."
        assert exc.value.attribute_index == 1
        assert exc.value.option_index is None

    def test_first_bad_attribute_reported(self):
        request = make_request(
            color(),
            AttributeSpec("", 1, []),
            AttributeSpec("", None, []),
        )

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert exc.value.attribute_index == 1


class TestOptionRules:
    """Option-level rules carry both indices."""

    def test_option_name_required(self):
        request = make_request(
            color(),
            color(options=[OptionSpec("Red", 0), OptionSpec("Blue", 1), OptionSpec("", 2)]),
        )

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert str(exc.value) == (
            "Group attribute at index 1, Option at index 2 - Name is required."
        )
        assert exc.value.path == (1, 2)

    def test_option_order_required(self):
        request = make_request(color(options=[OptionSpec("Red", 0), OptionSpec("Blue")]))

        with pytest.raises(ValidationError) as exc:
            validate_item_group(request)

        assert str(exc.value) == (
            "Group attribute at index 0, Option at index 1 - Order is required."
        )
        assert exc.value.attribute_index == 0
        assert exc.value.option_index == 1

    def test_option_zero_order_is_valid(self):
        validate_item_group(make_request(color(options=[OptionSpec("Red", 0)])))

    def test_attribute_checks_precede_its_options(self):
        request = make_request(AttributeSpec("Color", None, [OptionSpec("", None)]))

        with pytest.raises(ValidationError, match="Order is required") as exc:
            validate_item_group(request)

        assert exc.value.option_index is None
