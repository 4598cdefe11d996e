"""Shared fixtures for journal tests."""

from __future__ import annotations

import pytest

from solid_journal import Journal, JournalPersistence


@pytest.fixture
def journal() -> Journal:
    j = Journal()
    j.add_entry("Hello World!")
    j.add_entry("Goodbye World!")
    return j


@pytest.fixture
def persistence() -> JournalPersistence:
    return JournalPersistence()
