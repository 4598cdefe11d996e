from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from .base import BaseSpecification
from .exceptions import CompositionError

T = TypeVar("T")


class AttributeSpecification(BaseSpecification[T]):
    """
    Specification that compares a single attribute of the item for equality.

    The attribute is read with plain ``getattr``; an item lacking it raises
    ``AttributeError`` to the caller rather than silently failing the match.
    """

    def __init__(self, attr: str, value: Any) -> None:
        if not attr:
            raise CompositionError("attr", "Attribute name must be a non-empty string")
        self._attr = attr
        self._value = value

    @property
    def attr(self) -> str:
        return self._attr

    @property
    def value(self) -> Any:
        return self._value

    def is_satisfied(self, item: T) -> bool:
        return bool(getattr(item, self._attr) == self._value)

    def to_dict(self) -> dict[str, Any]:
        val = self._value.value if isinstance(self._value, Enum) else self._value
        return {
            "op": "=",
            "attr": self._attr,
            "val": val,
        }
