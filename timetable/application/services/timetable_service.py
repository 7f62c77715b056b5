"""
Timetable Service

Keeps the in-memory schedule used for display in step with the entry store.

Mutations are local-first: memory is updated before the store is called and
is never rolled back when the store call fails. The failure is logged and
returned in the transition's SyncOutcome. Memory and store may therefore
diverge until the next successful reload, which replaces memory with the
store's contents.
"""

import threading
from dataclasses import dataclass

from timetable.core.observability import get_logger
from timetable.domain.shared.exceptions import StoreError
from timetable.domain.timetable.entry import (
    TimetableEntry,
    natural_key,
    require_valid,
)
from timetable.domain.timetable.filters import filter_by_day
from timetable.domain.timetable.repository import EntryStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class SyncOutcome:
    """Result of the durable step of one transition."""

    operation: str
    durable: bool
    error: StoreError | None = None
    entry: TimetableEntry | None = None


class TimetableService:
    """
    In-memory mirror of stored timetable entries.

    Order is insertion order for added entries and store order after a load;
    the sequence is never reordered otherwise. Transitions are serialized
    by a lock owned by the instance.
    """

    def __init__(self, store: EntryStore):
        """
        Initialize the service and perform the initial load.

        A failed load leaves the schedule empty; the failure is logged and
        kept in ``initial_load``.

        Args:
            store: Store the schedule is persisted to
        """
        self._store = store
        self._entries: list[TimetableEntry] = []
        self._lock = threading.RLock()
        self.initial_load = self._load("initialize")

    @property
    def entries(self) -> tuple[TimetableEntry, ...]:
        """Snapshot of the current schedule."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _load(self, operation: str) -> SyncOutcome:
        with self._lock:
            try:
                loaded = self._store.load_all()
            except StoreError as e:
                logger.warning(
                    "Failed to load entries from store",
                    operation=operation,
                    error_type=e.error_type.value,
                    error=e.message,
                )
                return SyncOutcome(operation=operation, durable=False, error=e)

            self._entries = list(loaded)
            logger.info("Entries loaded", operation=operation, count=len(loaded))
            return SyncOutcome(operation=operation, durable=True)

    def reload(self) -> SyncOutcome:
        """
        Replace the schedule with the store's contents.

        On failure the current schedule is left untouched.
        """
        return self._load("reload")

    def add(self, candidate: TimetableEntry) -> SyncOutcome:
        """
        Append an entry and persist it.

        The entry stays in memory even if the insert fails.

        Args:
            candidate: Entry to add

        Returns:
            Outcome of the insert

        Raises:
            EntryValidationError: If activity, time or day is empty; nothing
                is changed and the store is not called
        """
        entry = require_valid(candidate)
        with self._lock:
            self._entries.append(entry)
            try:
                self._store.insert(entry)
            except StoreError as e:
                activity, time, day = natural_key(entry)
                logger.warning(
                    "Store insert failed; entry kept in memory only",
                    error_type=e.error_type.value,
                    error=e.message,
                    activity=activity,
                    time=time,
                    day=day,
                )
                return SyncOutcome(operation="add", durable=False, error=e, entry=entry)
            return SyncOutcome(operation="add", durable=True, entry=entry)

    def remove(self, position: int) -> SyncOutcome:
        """
        Delete the entry at ``position`` from the store and from memory.

        The store deletes every row sharing the entry's natural key, while
        memory drops only this one entry. The entry leaves memory even if
        the delete fails.

        Args:
            position: Index into ``entries``, as returned by ``filter_by_day``

        Returns:
            Outcome of the delete, carrying the removed entry

        Raises:
            IndexError: If ``position`` is out of range; the store is not called
        """
        with self._lock:
            if not 0 <= position < len(self._entries):
                raise IndexError(
                    f"position {position} out of range for {len(self._entries)} entries"
                )
            entry = self._entries[position]
            activity, time, day = natural_key(entry)
            error: StoreError | None = None
            try:
                self._store.delete_by_key(activity, time, day)
            except StoreError as e:
                error = e
                logger.warning(
                    "Store delete failed; entry removed from memory only",
                    error_type=e.error_type.value,
                    error=e.message,
                    activity=activity,
                    time=time,
                    day=day,
                )
            finally:
                del self._entries[position]

            return SyncOutcome(
                operation="remove", durable=error is None, error=error, entry=entry
            )

    def filter_by_day(self, day: str) -> list[tuple[int, TimetableEntry]]:
        """Entries filed under ``day`` with their positions; "" means all."""
        return filter_by_day(self.entries, day)
