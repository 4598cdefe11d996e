from .attributes import AttributeSpecification
from .base import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    ensure_specification,
)
from .catalog import Color, ColorSpecification, Product, Size, SizeSpecification
from .exceptions import CompositionError, SpecificationError
from .filtering import SpecificationFilter, filter_items

__all__ = [
    # Core types
    "BaseSpecification",
    "AttributeSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "ensure_specification",
    # Filtering
    "SpecificationFilter",
    "filter_items",
    # Catalog example
    "Color",
    "Size",
    "Product",
    "ColorSpecification",
    "SizeSpecification",
    # Exceptions
    "SpecificationError",
    "CompositionError",
]
