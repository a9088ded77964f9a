"""
Progress module interfaces.

The progress store is an external collaborator keyed by
(username, document_id). Implementations guarantee that each get and put
is atomic; there are no cross-key transactions.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthPrincipal

from .models import ProgressRecord


@runtime_checkable
class IProgressStore(Protocol):
    """Registry of per-user, per-document reading progress."""

    async def get_doc(self, username: str, document_id: str) -> Optional[ProgressRecord]:
        """
        Look up the stored record.

        Returns:
            The record, or None if nothing was pushed for this key

        Raises:
            StoreError: If the lookup fails
        """
        ...

    async def put_doc(self, username: str, document_id: str, record: ProgressRecord) -> None:
        """
        Insert or fully replace the record for this key.

        Raises:
            StoreError: If the write fails
        """
        ...


@runtime_checkable
class IProgressService(Protocol):
    """Pull and push operations of the sync protocol."""

    async def pull(self, principal: AuthPrincipal, document_id: str) -> Optional[ProgressRecord]:
        """
        Fetch the principal's progress for a document.

        Returns:
            The stored record, or None if nothing was pushed yet

        Raises:
            DocumentFieldMissingError: If document_id is not a valid key
            InternalError: If the store fails
        """
        ...

    async def push(self, principal: AuthPrincipal, record: ProgressRecord) -> ProgressRecord:
        """
        Stamp the record with the server time and store it.

        Returns:
            The record as stored, with its server timestamp

        Raises:
            InternalError: If the store fails
        """
        ...
