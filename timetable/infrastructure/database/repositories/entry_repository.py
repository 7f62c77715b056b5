"""
Entry store implementation backed by a relational database.

This module implements the EntryStore interface defined in the domain layer
using SQLModel. Every operation opens its own connection and closes it before
returning; there is no pooling and no transaction spanning operations.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter

from sqlalchemy import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, delete, select

from timetable.core.config import Settings
from timetable.core.observability import get_logger, log_database_operation
from timetable.domain.shared.exceptions import (
    ConfigMissingError,
    StoreReadError,
    StoreUnavailableError,
    StoreWriteError,
)
from timetable.domain.timetable.entry import TimetableEntry
from timetable.domain.timetable.repository import EntryStore
from timetable.infrastructure.database.engine import build_engine
from timetable.infrastructure.database.models import TimetableEntryRow

from .mappers.entry_mapper import EntryMapper, RowDecodeError

logger = get_logger(__name__)


class SqlEntryStore(EntryStore):
    """
    Store adapter for timetable entries.

    The only component that talks to the backend. Translates insert, load
    and delete-by-natural-key into statements against ``timetable_entries``
    and maps rows back to entries.
    """

    def __init__(
        self,
        database_url: str,
        connect_timeout: int = 10,
        application_name: str = "timetable",
        echo: bool = False,
    ):
        """
        Initialize the store with an explicit backend URL.

        Args:
            database_url: Connection URL for the backend
            connect_timeout: Seconds to wait when opening a connection
            application_name: Name reported to the backend
            echo: Log emitted SQL

        Raises:
            ConfigMissingError: If ``database_url`` is empty
        """
        if not database_url:
            raise ConfigMissingError("DATABASE_URL")
        self.engine = build_engine(
            database_url,
            connect_timeout=connect_timeout,
            application_name=application_name,
            echo=echo,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqlEntryStore":
        """Build a store from loaded settings."""
        return cls(
            settings.SQLALCHEMY_DATABASE_URI,
            connect_timeout=settings.DATABASE_CONNECT_TIMEOUT,
            application_name=settings.PROJECT_NAME,
        )

    def _connect(self, operation: str) -> Connection:
        try:
            return self.engine.connect()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(operation, {"reason": str(e)}) from e

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """Open a connection and session scoped to one operation."""
        started = perf_counter()
        success = False
        try:
            connection = self._connect(operation)
            with connection, Session(bind=connection) as session:
                yield session
            success = True
        finally:
            log_database_operation(operation, perf_counter() - started, success)

    def insert(self, entry: TimetableEntry) -> None:
        with self._session("insert") as session:
            try:
                session.add(EntryMapper.domain_to_sql(entry))
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise StoreWriteError(
                    "insert",
                    str(e),
                    {"activity": entry.activity, "time": entry.time, "day": entry.day},
                ) from e

    def load_all(self) -> list[TimetableEntry]:
        with self._session("load_all") as session:
            try:
                statement = select(TimetableEntryRow).order_by(TimetableEntryRow.id)
                rows = session.exec(statement).all()
                return [EntryMapper.sql_to_domain(row) for row in rows]
            except (SQLAlchemyError, RowDecodeError) as e:
                raise StoreReadError("load_all", str(e)) from e

    def delete_by_key(self, activity: str, time: str, day: str) -> None:
        with self._session("delete_by_key") as session:
            try:
                statement = delete(TimetableEntryRow).where(
                    TimetableEntryRow.activity == activity,
                    TimetableEntryRow.time == time,
                    TimetableEntryRow.day == day,
                )
                result = session.execute(statement)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise StoreWriteError(
                    "delete_by_key",
                    str(e),
                    {"activity": activity, "time": time, "day": day},
                ) from e

        logger.debug(
            "Entries deleted",
            activity=activity,
            time=time,
            day=day,
            rows_deleted=result.rowcount,
        )

    def create_schema(self) -> None:
        """Create ``timetable_entries`` if missing. Tests and local use only."""
        SQLModel.metadata.create_all(
            self.engine, tables=[TimetableEntryRow.__table__]  # type: ignore[list-item]
        )

    def dispose(self) -> None:
        """Release the engine."""
        self.engine.dispose()
