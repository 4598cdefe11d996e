import pytest

from solid_specifications import (
    AttributeSpecification,
    Color,
    ColorSpecification,
    CompositionError,
    Product,
    Size,
    SizeSpecification,
)


def test_color_specification(apple: Product, house: Product):
    spec = ColorSpecification(Color.GREEN)
    assert spec.is_satisfied(apple) is True
    assert spec.is_satisfied(house) is False


def test_size_specification(apple: Product, tree: Product):
    spec = SizeSpecification(Size.LARGE)
    assert spec.is_satisfied(tree) is True
    assert spec.is_satisfied(apple) is False


def test_attribute_specification_on_plain_objects():
    class Row:
        def __init__(self, status: str) -> None:
            self.status = status

    spec = AttributeSpecification("status", "active")
    assert spec.is_satisfied(Row("active")) is True
    assert spec.is_satisfied(Row("archived")) is False


def test_attribute_specification_missing_attribute_propagates():
    """Inspecting an attribute the item lacks raises to the caller."""
    spec = AttributeSpecification("weight", 3)
    with pytest.raises(AttributeError):
        spec.is_satisfied(object())


def test_attribute_specification_rejects_empty_attr():
    with pytest.raises(CompositionError) as exc_info:
        AttributeSpecification("", 1)
    assert exc_info.value.param_name == "attr"


def test_specification_is_pure(tree: Product):
    """Evaluating a spec does not change the item or the spec."""
    spec = ColorSpecification(Color.GREEN)
    before_item = tree.model_dump()
    before_spec = spec.to_dict()
    for _ in range(3):
        assert spec.is_satisfied(tree) is True
    assert tree.model_dump() == before_item
    assert spec.to_dict() == before_spec


def test_to_dict_uses_enum_values():
    assert ColorSpecification(Color.BLUE).to_dict() == {
        "op": "=",
        "attr": "color",
        "val": "blue",
    }


def test_structural_equality():
    assert ColorSpecification(Color.RED) == ColorSpecification(Color.RED)
    assert ColorSpecification(Color.RED) != ColorSpecification(Color.BLUE)
    # Same description, different variant.
    assert ColorSpecification(Color.RED) != AttributeSpecification("color", Color.RED)


def test_specifications_are_hashable():
    """Equal specifications hash alike and collapse in sets and dict keys."""
    specs = {ColorSpecification(Color.RED), ColorSpecification(Color.RED)}
    assert len(specs) == 1
    composite = ColorSpecification(Color.RED) & SizeSpecification(Size.SMALL)
    lookup = {composite: "small red"}
    same = ColorSpecification(Color.RED) & SizeSpecification(Size.SMALL)
    assert lookup[same] == "small red"


def test_repr_contains_description():
    text = repr(SizeSpecification(Size.SMALL))
    assert text.startswith("SizeSpecification(")
    assert "'small'" in text


def test_product_requires_name():
    with pytest.raises(ValueError):
        Product(name=None, color=Color.RED, size=Size.SMALL)  # type: ignore[arg-type]
