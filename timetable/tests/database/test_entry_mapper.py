import pytest

from timetable.domain.timetable.entry import TimetableEntry
from timetable.infrastructure.database.models import TimetableEntryRow
from timetable.infrastructure.database.repositories.mappers.entry_mapper import (
    EntryMapper,
    RowDecodeError,
)


def test_domain_to_sql_leaves_id_to_the_backend():
    entry = TimetableEntry(activity="Gym", time="7:00", day="Monday", notes="legs")

    row = EntryMapper.domain_to_sql(entry)

    assert row.id is None
    assert (row.activity, row.time, row.day, row.notes) == (
        "Gym",
        "7:00",
        "Monday",
        "legs",
    )


def test_sql_to_domain_normalizes_null_notes():
    row = TimetableEntryRow(id=7, activity="Gym", time="7:00", day="Monday", notes=None)

    assert EntryMapper.sql_to_domain(row) == TimetableEntry(
        activity="Gym", time="7:00", day="Monday", notes=""
    )


def test_sql_to_domain_rejects_null_required_column():
    row = TimetableEntryRow(id=7, activity="Gym", time="7:00", day="Monday")
    row.day = None  # type: ignore[assignment]

    with pytest.raises(RowDecodeError, match="row 7"):
        EntryMapper.sql_to_domain(row)
