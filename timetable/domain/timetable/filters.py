"""Day filter over the in-memory schedule."""

from collections.abc import Sequence

from .entry import TimetableEntry


def filter_by_day(
    entries: Sequence[TimetableEntry], day: str
) -> list[tuple[int, TimetableEntry]]:
    """
    Select entries filed under ``day``, keeping their original positions.

    An empty ``day`` selects every entry. Matching is exact and
    case-sensitive. The returned index is the entry's position in
    ``entries`` and is what callers pass back to remove it.

    Args:
        entries: The unfiltered sequence
        day: Day name to match, or "" for all days

    Returns:
        (index, entry) pairs in original order
    """
    return [
        (index, entry)
        for index, entry in enumerate(entries)
        if not day or entry.day == day
    ]
