"""
Specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any

from solid_core.primitives.exceptions import InvalidArgumentError, SolidError


class SpecificationError(SolidError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class CompositionError(SpecificationError, InvalidArgumentError):
    """
    A specification or filter was built with an absent or invalid argument.

    Raised at construction time, before any item is evaluated.
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "argument": self.param_name,
            "message": self.message,
        }
