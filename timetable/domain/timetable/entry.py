"""
Timetable entry value object and its validation rules.

An entry is one schedule item. Field values are opaque text: times are not
parsed and days are not checked against the weekday list here, because the
presentation layer only ever offers the seven weekday names.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from timetable.domain.shared.exceptions import EntryValidationError

REQUIRED_FIELDS = ("activity", "time", "day")


class Weekday(str, Enum):
    """Days a schedule item can be filed under, in calendar order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


WEEKDAYS: tuple[str, ...] = tuple(day.value for day in Weekday)


class TimetableEntry(BaseModel):
    """A single schedule item.

    ``notes`` uses the empty string for "no notes"; it is never ``None``.
    """

    model_config = ConfigDict(frozen=True)

    activity: str
    time: str
    day: str
    notes: str = ""


def blank() -> TimetableEntry:
    """Return the zero-value entry used to seed input state."""
    return TimetableEntry(activity="", time="", day="", notes="")


def missing_fields(candidate: TimetableEntry) -> list[str]:
    """Names of required fields that are empty, in declaration order."""
    return [name for name in REQUIRED_FIELDS if not getattr(candidate, name)]


def validate(candidate: TimetableEntry) -> bool:
    """True iff activity, time and day are all non-empty."""
    return not missing_fields(candidate)


def require_valid(candidate: TimetableEntry) -> TimetableEntry:
    """Return ``candidate`` unchanged or raise ``EntryValidationError``."""
    missing = missing_fields(candidate)
    if missing:
        raise EntryValidationError(missing)
    return candidate


def natural_key(entry: TimetableEntry) -> tuple[str, str, str]:
    """The (activity, time, day) triple used to identify rows for deletion."""
    return entry.activity, entry.time, entry.day
