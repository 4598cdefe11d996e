"""Specification base class and boolean composites."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from solid_core.domain.specification import ISpecification

from .exceptions import CompositionError

T = TypeVar("T")


def ensure_specification(spec: Any, param_name: str) -> ISpecification[Any]:
    """Return *spec* unchanged, or raise ``CompositionError`` if it is unusable."""
    if spec is None:
        raise CompositionError(param_name)
    if not isinstance(spec, ISpecification):
        raise CompositionError(
            param_name,
            f"Argument '{param_name}' must be a specification, "
            f"got {type(spec).__name__}",
        )
    return spec


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly description of this specification."""
        ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSpecification) or type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), repr(self.to_dict())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


def _describe(spec: ISpecification[Any]) -> dict[str, Any]:
    if isinstance(spec, BaseSpecification):
        return spec.to_dict()
    return {"op": "custom", "type": type(spec).__name__}


class _CompositeSpecification(BaseSpecification[T]):
    """N-ary composite; needs at least two children, none of them absent."""

    op: str

    def __init__(
        self,
        first: ISpecification[T],
        second: ISpecification[T],
        *more: ISpecification[T],
    ) -> None:
        children = [
            ensure_specification(first, "first"),
            ensure_specification(second, "second"),
        ]
        children.extend(
            ensure_specification(spec, f"specifications[{i}]")
            for i, spec in enumerate(more, start=2)
        )
        self._specifications: tuple[ISpecification[T], ...] = tuple(children)

    @property
    def specifications(self) -> tuple[ISpecification[T], ...]:
        return self._specifications

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "conditions": [_describe(spec) for spec in self._specifications],
        }


class AndSpecification(_CompositeSpecification[T]):
    """Logical AND composite specification.

    Children are evaluated left to right; evaluation stops at the first
    child that is not satisfied.
    """

    op = "and"

    def is_satisfied(self, item: T) -> bool:
        return all(spec.is_satisfied(item) for spec in self._specifications)


class OrSpecification(_CompositeSpecification[T]):
    """Logical OR composite specification; stops at the first satisfied child."""

    op = "or"

    def is_satisfied(self, item: T) -> bool:
        return any(spec.is_satisfied(item) for spec in self._specifications)


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T]) -> None:
        self._specification = ensure_specification(specification, "specification")

    @property
    def specification(self) -> ISpecification[T]:
        return self._specification

    def is_satisfied(self, item: T) -> bool:
        return not self._specification.is_satisfied(item)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [_describe(self._specification)],
        }
