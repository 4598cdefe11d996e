"""
Lazy, specification-driven filtering.

``filter_items`` validates its arguments eagerly and then returns a
generator, so a bad call fails before any item is pulled while the
matching itself stays pull-based: items the caller never consumes are
never evaluated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from solid_core.domain.specification import IFilter, ISpecification

from .base import ensure_specification

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")

logger = logging.getLogger("solid.specifications.filter")


def filter_items(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
    """Yield, in their original order, the items of *items* satisfying *spec*.

    Raises:
        CompositionError: If *spec* is absent or not a specification.
    """
    ensure_specification(spec, "spec")
    return _iter_matching(items, spec)


def _iter_matching(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
    logger.debug("Filtering with %r", spec)
    scanned = 0
    matched = 0
    for item in items:
        scanned += 1
        if spec.is_satisfied(item):
            matched += 1
            yield item
    logger.debug("Filter exhausted: %d of %d items matched", matched, scanned)


class SpecificationFilter(IFilter[T]):
    """``IFilter`` implementation backed by :func:`filter_items`.

    Stateless; one instance can serve any number of calls.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        return filter_items(items, spec)
