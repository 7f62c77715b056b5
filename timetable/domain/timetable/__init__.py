"""
Timetable domain: entries, the store contract and the day filter.
"""

from .entry import (
    WEEKDAYS,
    TimetableEntry,
    Weekday,
    blank,
    missing_fields,
    natural_key,
    require_valid,
    validate,
)
from .filters import filter_by_day
from .repository import EntryStore

__all__ = [
    "WEEKDAYS",
    "EntryStore",
    "TimetableEntry",
    "Weekday",
    "blank",
    "filter_by_day",
    "missing_fields",
    "natural_key",
    "require_valid",
    "validate",
]
