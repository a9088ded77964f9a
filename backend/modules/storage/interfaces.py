"""
Storage module interface.

A sync store serves both the credential and the progress contracts; the
application holds exactly one for its whole lifetime.
"""

from typing import Protocol, runtime_checkable

from modules.auth.interfaces import ICredentialStore
from modules.progress.interfaces import IProgressStore


@runtime_checkable
class ISyncStore(ICredentialStore, IProgressStore, Protocol):
    """Combined credential and progress store."""

    async def close(self) -> None:
        """Release any resources held by the store."""
        ...
