"""
Supabase-backed sync store.

Tables (see migrations/001_kosync_tables.sql):
- kosync_users(username primary key, secret)
- kosync_progress(username, document, percentage, progress, device,
  device_id, timestamp) with primary key (username, document)

The Supabase client is synchronous, so every query runs in a worker
thread; a slow database never blocks the event loop.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from postgrest.exceptions import APIError
from supabase import Client

from shared.exceptions import DuplicateKeyError, StoreError
from shared.repository import BaseRepository
from modules.progress.models import ProgressRecord

from .interfaces import ISyncStore

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseStore(BaseRepository[ProgressRecord], ISyncStore):
    """
    Credential and progress store on Supabase tables.

    Note: This store does NOT validate keys or compare secrets.
    The services do that before calling it.
    """

    def __init__(
        self,
        db: Client,
        users_table: str = "kosync_users",
        progress_table: str = "kosync_progress",
    ) -> None:
        super().__init__(db)
        self._users_table = users_table
        self._progress_table = progress_table

    async def _run(self, operation: str, query: Callable[[], R]) -> R:
        try:
            return await asyncio.to_thread(query)
        except APIError as e:
            logger.debug("Supabase %s failed", operation, exc_info=True)
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateKeyError(operation, reason=e.message) from e
            raise StoreError(operation, reason=f"APIError {e.code}: {e.message}") from e
        except Exception as e:
            logger.debug("Supabase %s failed", operation, exc_info=True)
            raise StoreError(operation, reason=f"{type(e).__name__}: {e}") from e

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    async def get_user(self, username: str) -> Optional[str]:
        def query():
            return (
                self._table(self._users_table)
                .select("secret")
                .eq("username", username)
                .limit(1)
                .execute()
            )

        result = await self._run("get_user", query)
        if not result.data:
            return None
        return result.data[0]["secret"]

    async def put_user(self, username: str, secret: str) -> None:
        def query():
            return (
                self._table(self._users_table)
                .insert({"username": username, "secret": secret})
                .execute()
            )

        await self._run("put_user", query)

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    async def get_doc(self, username: str, document_id: str) -> Optional[ProgressRecord]:
        def query():
            return (
                self._table(self._progress_table)
                .select("document, percentage, progress, device, device_id, timestamp")
                .eq("username", username)
                .eq("document", document_id)
                .limit(1)
                .execute()
            )

        result = await self._run("get_doc", query)
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    async def put_doc(self, username: str, document_id: str, record: ProgressRecord) -> None:
        row = self._map_to_row(username, document_id, record)

        def query():
            return (
                self._table(self._progress_table)
                .upsert(row, on_conflict="username,document")
                .execute()
            )

        await self._run("put_doc", query)

    async def close(self) -> None:
        pass

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_row(username: str, document_id: str, record: ProgressRecord) -> dict[str, Any]:
        return {
            "username": username,
            "document": document_id,
            "percentage": record.percentage,
            "progress": record.progress_cursor,
            "device": record.device,
            "device_id": record.device_id,
            "timestamp": record.timestamp,
        }

    @staticmethod
    def _map_to_record(row: dict[str, Any]) -> ProgressRecord:
        return ProgressRecord(
            document=row["document"],
            percentage=float(row["percentage"]),
            progress=row["progress"],
            device=row["device"],
            device_id=row["device_id"],
            timestamp=int(row["timestamp"]) if row.get("timestamp") is not None else None,
        )
