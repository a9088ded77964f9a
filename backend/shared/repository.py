"""
Base repository class for Supabase-backed storage.

Encapsulates Supabase client access for store implementations.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides the Supabase client as ``self._db`` and a generic parameter
    for the record type the subclass maps rows to.

    Example:
        class ProgressRepository(BaseRepository[ProgressRecord]):
            def find(self, username: str, document: str) -> Optional[ProgressRecord]:
                result = (
                    self._table("kosync_progress")
                    .select("*")
                    .eq("username", username)
                    .eq("document", document)
                    .execute()
                )
                return ProgressRecord(**result.data[0]) if result.data else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self, name: str):
        """Start a query builder on the given table."""
        return self._db.table(name)
