"""Journal — stores and removes entries, nothing else.

Saving and loading live in :mod:`solid_journal.persistence`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from solid_core.domain.value_object import ValueObject
from solid_core.primitives.exceptions import InvalidArgumentError

from .exceptions import EntryNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("solid.journal")


class JournalEntry(ValueObject):
    number: int
    text: str

    def __str__(self) -> str:
        return f"{self.number}: {self.text}"


class Journal:
    """Ordered collection of numbered entries.

    Entry numbers come from a per-journal counter and are never reused,
    so removing an entry does not renumber the others.
    """

    def __init__(self, entries: Iterable[JournalEntry] = ()) -> None:
        self._entries: list[JournalEntry] = list(entries)
        self._count = max((e.number for e in self._entries), default=0)

    def add_entry(self, text: str) -> int:
        """Append *text* and return the number assigned to it.

        Raises:
            InvalidArgumentError: If *text* contains a line break; entries are
                stored one per line.
        """
        if text and text.splitlines() != [text]:
            raise InvalidArgumentError(
                "text", "Journal entry text must be a single line"
            )
        self._count += 1
        self._entries.append(JournalEntry(number=self._count, text=text))
        logger.debug("Added journal entry %d", self._count)
        return self._count

    def remove_entry(self, index: int) -> JournalEntry:
        """Remove and return the entry at position *index*."""
        if not -len(self._entries) <= index < len(self._entries):
            raise EntryNotFoundError(index, len(self._entries))
        entry = self._entries.pop(index)
        logger.debug("Removed journal entry %d", entry.number)
        return entry

    @property
    def entries(self) -> tuple[JournalEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(tuple(self._entries))

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self._entries)
