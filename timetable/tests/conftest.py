from collections.abc import Generator
from pathlib import Path

import pytest

from timetable.domain.timetable.entry import TimetableEntry
from timetable.infrastructure.database.repositories.entry_repository import (
    SqlEntryStore,
)
from timetable.tests.utils.stores import InMemoryEntryStore


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite database unique to the test."""
    return f"sqlite:///{tmp_path / 'timetable.db'}"


@pytest.fixture
def sql_store(database_url: str) -> Generator[SqlEntryStore, None, None]:
    """Store adapter over a database with the schema in place."""
    store = SqlEntryStore(database_url)
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def memory_store() -> InMemoryEntryStore:
    return InMemoryEntryStore()


@pytest.fixture
def gym() -> TimetableEntry:
    return TimetableEntry(activity="Gym", time="7:00", day="Monday", notes="")


@pytest.fixture
def week_entries() -> list[TimetableEntry]:
    """A small week with two Monday entries and one on each of two other days."""
    return [
        TimetableEntry(activity="Gym", time="7:00", day="Monday"),
        TimetableEntry(activity="Standup", time="9:30", day="Tuesday", notes="Zoom"),
        TimetableEntry(activity="Reading", time="21:00", day="Monday"),
        TimetableEntry(activity="Groceries", time="10:00", day="Saturday"),
    ]
