"""
Mapper for converting between timetable entries and table rows.
"""

from pydantic import ValidationError

from timetable.domain.timetable.entry import TimetableEntry
from timetable.infrastructure.database.models import TimetableEntryRow


class RowDecodeError(ValueError):
    """Raised when a stored row cannot be turned into an entry."""


class EntryMapper:
    """
    Mapper class for converting between entries and SQL rows.

    The row id never crosses into the domain; a null ``notes`` column is
    read back as the empty string.
    """

    @staticmethod
    def domain_to_sql(entry: TimetableEntry) -> TimetableEntryRow:
        """
        Convert an entry to a new, unsaved row.

        Args:
            entry: Entry to convert

        Returns:
            Row without an id
        """
        return TimetableEntryRow(
            activity=entry.activity,
            time=entry.time,
            day=entry.day,
            notes=entry.notes,
        )

    @staticmethod
    def sql_to_domain(row: TimetableEntryRow) -> TimetableEntry:
        """
        Convert a loaded row to an entry.

        Args:
            row: Row read from the backend

        Returns:
            Entry with ``notes`` normalized to a string

        Raises:
            RowDecodeError: If a required column holds an unusable value
        """
        try:
            return TimetableEntry(
                activity=row.activity,
                time=row.time,
                day=row.day,
                notes=row.notes or "",
            )
        except ValidationError as e:
            raise RowDecodeError(f"row {row.id}: {e}") from e
