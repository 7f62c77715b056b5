"""
Database repository implementations.
"""

from .entry_repository import SqlEntryStore

__all__ = ["SqlEntryStore"]
