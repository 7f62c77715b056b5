"""
Unit Tests for the Timetable Entry Value Object

Covers required-field validation, the blank entry and natural keys.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from timetable.domain.shared.exceptions import EntryValidationError, ErrorType
from timetable.domain.timetable.entry import (
    WEEKDAYS,
    TimetableEntry,
    Weekday,
    blank,
    missing_fields,
    natural_key,
    require_valid,
    validate,
)


class TestEntryCreation:
    """Test entry construction."""

    def test_notes_default_to_empty_string(self):
        entry = TimetableEntry(activity="Gym", time="7:00", day="Monday")

        assert entry.notes == ""

    def test_values_are_kept_verbatim(self):
        entry = TimetableEntry(activity="  Gym ", time="7am-ish", day="monday")

        assert entry.activity == "  Gym "
        assert entry.time == "7am-ish"
        assert entry.day == "monday"

    def test_entry_is_immutable(self):
        entry = TimetableEntry(activity="Gym", time="7:00", day="Monday")

        with pytest.raises(PydanticValidationError):
            entry.activity = "Swim"  # type: ignore[misc]

    def test_blank_entry_has_all_fields_empty(self):
        entry = blank()

        assert entry == TimetableEntry(activity="", time="", day="", notes="")


class TestEntryValidation:
    """Test the required-field rules."""

    def test_complete_entry_is_valid(self):
        entry = TimetableEntry(activity="Gym", time="7:00", day="Monday")

        assert validate(entry)
        assert missing_fields(entry) == []
        assert require_valid(entry) is entry

    def test_notes_are_not_required(self):
        assert validate(TimetableEntry(activity="Gym", time="7:00", day="Monday", notes=""))

    @pytest.mark.parametrize(
        "fields, missing",
        [
            ({"activity": "", "time": "7:00", "day": "Monday"}, ["activity"]),
            ({"activity": "Gym", "time": "", "day": "Monday"}, ["time"]),
            ({"activity": "Gym", "time": "7:00", "day": ""}, ["day"]),
            ({"activity": "", "time": "", "day": ""}, ["activity", "time", "day"]),
        ],
    )
    def test_empty_required_fields_are_reported(self, fields, missing):
        entry = TimetableEntry(**fields, notes="something")

        assert not validate(entry)
        assert missing_fields(entry) == missing

    def test_blank_entry_is_invalid(self):
        assert not validate(blank())

    def test_require_valid_raises_with_missing_fields(self):
        with pytest.raises(EntryValidationError) as exc_info:
            require_valid(TimetableEntry(activity="Gym", time="", day=""))

        error = exc_info.value
        assert error.missing_fields == ["time", "day"]
        assert error.error_type == ErrorType.VALIDATION_REJECTED
        assert error.to_dict()["details"] == {"missing_fields": "time,day"}

    def test_unknown_day_is_not_rejected(self):
        assert validate(TimetableEntry(activity="Gym", time="7:00", day="Funday"))


class TestNaturalKey:
    def test_natural_key_ignores_notes(self):
        first = TimetableEntry(activity="Gym", time="7:00", day="Monday", notes="legs")
        second = TimetableEntry(activity="Gym", time="7:00", day="Monday", notes="arms")

        assert natural_key(first) == ("Gym", "7:00", "Monday")
        assert natural_key(first) == natural_key(second)


class TestWeekdays:
    def test_weekdays_in_calendar_order(self):
        assert WEEKDAYS == (
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        )

    def test_weekday_compares_as_text(self):
        assert Weekday.MONDAY == "Monday"
