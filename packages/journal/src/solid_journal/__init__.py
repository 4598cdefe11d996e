"""solid-journal — single-responsibility journal example."""

from .exceptions import EntryNotFoundError, JournalError, JournalFormatError
from .journal import Journal, JournalEntry
from .persistence import JournalPersistence, PersistenceOptions

__all__ = [
    "Journal",
    "JournalEntry",
    "JournalPersistence",
    "PersistenceOptions",
    # Exceptions
    "JournalError",
    "EntryNotFoundError",
    "JournalFormatError",
]
