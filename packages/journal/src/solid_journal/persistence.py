"""JournalPersistence — writes journals to and reads them from text files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import JournalFormatError
from .journal import Journal, JournalEntry

if TYPE_CHECKING:
    from os import PathLike

logger = logging.getLogger("solid.journal.persistence")

_ENTRY_LINE = re.compile(r"^(\d+): (.*)$")


@dataclass(frozen=True)
class PersistenceOptions:
    """File encoding and line separator used for saved journals."""

    encoding: str = "utf-8"
    newline: str = "\n"


class JournalPersistence:
    """Saves and loads :class:`Journal` instances as ``<number>: <text>`` lines."""

    def __init__(self, options: PersistenceOptions | None = None) -> None:
        self._options = options or PersistenceOptions()

    @property
    def options(self) -> PersistenceOptions:
        return self._options

    def save(
        self,
        journal: Journal,
        filename: str | PathLike[str],
        overwrite: bool = False,
    ) -> bool:
        """Write *journal* to *filename*.

        Returns ``False`` without touching the file when it already exists
        and *overwrite* is not set.
        """
        path = Path(filename)
        mode = "w" if overwrite else "x"
        try:
            with path.open(mode, encoding=self._options.encoding, newline="") as fh:
                fh.write(self._options.newline.join(str(e) for e in journal))
        except FileExistsError:
            logger.warning("Journal file %s exists; not overwriting", path)
            return False
        logger.info("Saved %d journal entries to %s", len(journal), path)
        return True

    def load(self, filename: str | PathLike[str]) -> Journal:
        """Read a journal previously written by :meth:`save`.

        Raises:
            JournalFormatError: If a non-empty line is not ``<number>: <text>``.
        """
        path = Path(filename)
        with path.open(encoding=self._options.encoding, newline="") as fh:
            text = fh.read()
        lines = text.split(self._options.newline)
        entries = []
        for line_number, line in enumerate(lines, start=1):
            if not line:
                continue
            match = _ENTRY_LINE.match(line)
            if match is None:
                raise JournalFormatError(line_number, line)
            entries.append(JournalEntry(number=int(match[1]), text=match[2]))
        logger.info("Loaded %d journal entries from %s", len(entries), path)
        return Journal(entries)
