"""Root exceptions for the solid-patterns packages."""

from __future__ import annotations


class SolidError(Exception):
    """Root exception for every solid-patterns package."""


class InvalidArgumentError(SolidError, ValueError):
    """Raised when a required argument is absent or of the wrong kind.

    ``param_name`` names the offending parameter.
    """

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        self.message = message or f"Argument '{param_name}' is required"
        super().__init__(self.message)
