#!/usr/bin/env python
"""Demo: a journal that stores entries and a separate class that saves them."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .journal import Journal
from .persistence import JournalPersistence


def main(directory: str | Path = ".") -> Path:
    j = Journal()
    j.add_entry("Hello World!")
    j.add_entry("Goodbye World!")

    p = JournalPersistence()
    filename = Path(directory) / "journal.txt"
    if not p.save(j, filename):
        print(f"{filename} already exists, left unchanged")

    print(filename.read_text(encoding=p.options.encoding))
    return filename


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main(*sys.argv[1:2])
