"""Product catalog: the items and leaf specifications of the filtering example."""

from __future__ import annotations

from enum import Enum
from typing import Any

from solid_core.domain.value_object import ValueObject

from .attributes import AttributeSpecification


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Product(ValueObject):
    name: str
    color: Color
    size: Size


class ColorSpecification(AttributeSpecification[Any]):
    """Satisfied by items whose ``color`` equals the given color."""

    def __init__(self, color: Color) -> None:
        super().__init__("color", color)


class SizeSpecification(AttributeSpecification[Any]):
    """Satisfied by items whose ``size`` equals the given size."""

    def __init__(self, size: Size) -> None:
        super().__init__("size", size)
