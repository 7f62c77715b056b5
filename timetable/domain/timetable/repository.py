"""
Entry Store Interface

Defines the contract for durable timetable entry operations.
"""

from abc import ABC, abstractmethod

from .entry import TimetableEntry


class EntryStore(ABC):
    """
    Abstract store interface for timetable entries.

    Each call is atomic with respect to itself only; no transaction spans
    more than one call.
    """

    @abstractmethod
    def insert(self, entry: TimetableEntry) -> None:
        """
        Append one entry to the store.

        Duplicate natural keys are permitted.

        Args:
            entry: Entry to persist

        Raises:
            StoreUnavailableError: If no connection can be established
            StoreWriteError: If the insert fails after connecting
        """
        pass

    @abstractmethod
    def load_all(self) -> list[TimetableEntry]:
        """
        Load every stored entry in creation order.

        Returns:
            All entries, oldest first

        Raises:
            StoreUnavailableError: If no connection can be established
            StoreReadError: If the select or row decoding fails
        """
        pass

    @abstractmethod
    def delete_by_key(self, activity: str, time: str, day: str) -> None:
        """
        Delete every entry whose natural key matches exactly.

        Matching no entries is not an error.

        Args:
            activity: Activity to match
            time: Time label to match
            day: Day to match

        Raises:
            StoreUnavailableError: If no connection can be established
            StoreWriteError: If the delete fails after connecting
        """
        pass
