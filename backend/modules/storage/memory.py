"""
In-memory sync store.

Used for development and tests. Data lives for the lifetime of the
process. Each operation is a single dict access with no await in between,
so concurrent requests on one event loop always see whole records.
"""

from typing import Optional

from shared.exceptions import DuplicateKeyError
from modules.progress.models import ProgressRecord

from .interfaces import ISyncStore


class MemoryStore(ISyncStore):
    """Dict-backed implementation of the credential and progress stores."""

    def __init__(self) -> None:
        self._users: dict[str, str] = {}
        self._progress: dict[tuple[str, str], ProgressRecord] = {}

    async def get_user(self, username: str) -> Optional[str]:
        return self._users.get(username)

    async def put_user(self, username: str, secret: str) -> None:
        if username in self._users:
            raise DuplicateKeyError("put_user", reason="username exists")
        self._users[username] = secret

    async def get_doc(self, username: str, document_id: str) -> Optional[ProgressRecord]:
        record = self._progress.get((username, document_id))
        return record.model_copy() if record is not None else None

    async def put_doc(self, username: str, document_id: str, record: ProgressRecord) -> None:
        self._progress[(username, document_id)] = record.model_copy()

    async def close(self) -> None:
        pass
