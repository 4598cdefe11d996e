"""Specification pattern primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T_contra]):
    """
    Protocol for the Specification pattern.
    Encapsulates a single business rule that an item either satisfies or not.

    Implementations must be pure: the result depends only on the item and
    the parameters fixed at construction time.
    """

    def is_satisfied(self, item: T_contra) -> bool:
        """Return ``True`` when *item* satisfies this rule."""
        ...


@runtime_checkable
class IFilter(Protocol[T]):
    """
    Protocol for applying a specification to a sequence of items.

    New selection criteria are added as new specifications; a filter
    never needs to change to support them.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        """Lazily yield the items of *items* that satisfy *spec*, in order."""
        ...
