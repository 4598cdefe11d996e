"""Journal exceptions."""

from __future__ import annotations

from solid_core.primitives.exceptions import SolidError


class JournalError(SolidError):
    """Base exception for journal storage and persistence errors."""


class EntryNotFoundError(JournalError, IndexError):
    """Raised when removing an entry at a position the journal does not have."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"No journal entry at index {index} (journal has {size})")


class JournalFormatError(JournalError, ValueError):
    """Raised when a saved journal file contains a malformed line."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed journal line {line_number}: {line!r} "
            "(expected '<number>: <text>')"
        )
