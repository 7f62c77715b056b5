"""
SQLModel table definition for timetable entries.

The schema is managed outside this package; this model mirrors it so that
statements can be built against typed columns.
"""

from sqlmodel import Field, SQLModel


class TimetableEntryRow(SQLModel, table=True):
    """timetable_entries table definition."""

    __tablename__ = "timetable_entries"

    # Assigned by the backend on insert; defines load order
    id: int | None = Field(default=None, primary_key=True)
    activity: str
    time: str
    day: str
    notes: str | None = None
