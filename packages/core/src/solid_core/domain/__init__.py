"""Domain primitives: specification and filter protocols, value objects."""

from __future__ import annotations

from .specification import IFilter, ISpecification
from .value_object import ValueObject

__all__: list[str] = [
    "IFilter",
    "ISpecification",
    "ValueObject",
]
