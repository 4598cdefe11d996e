"""solid-core — shared protocols, value objects and exceptions."""

from __future__ import annotations

from .domain import IFilter, ISpecification, ValueObject
from .primitives import InvalidArgumentError, SolidError

__all__ = [
    "IFilter",
    "ISpecification",
    "InvalidArgumentError",
    "SolidError",
    "ValueObject",
]
