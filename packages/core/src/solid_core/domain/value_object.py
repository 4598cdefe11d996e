"""Immutable Value Object base class."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for Value Objects.

    Value objects are frozen and compared by their fields only; two
    instances of different classes are never equal.
    """

    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.model_dump(mode="json") == other.model_dump(mode="json")

    def __hash__(self) -> int:
        return hash(
            (type(self).__name__, *sorted(self.model_dump(mode="json").items()))
        )
