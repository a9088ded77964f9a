"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires the store into the
services. One container is created per application and kept on
``app.state``; every request reaches the same store handle through it.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthGate
    from modules.auth.service import AccountService
    from modules.progress.interfaces import IProgressService
    from modules.storage.interfaces import ISyncStore


class ServiceContainer:
    """
    Container for the store and the services built on it.

    The store is created lazily on first access from the settings unless
    one is passed in explicitly. Services are cached as singletons within
    the container.
    """

    def __init__(self, settings: Settings, store: "Optional[ISyncStore]" = None) -> None:
        self._settings = settings
        self._store = store
        self._auth_gate: "IAuthGate | None" = None
        self._account_service: "AccountService | None" = None
        self._progress_service: "IProgressService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def store(self) -> "ISyncStore":
        """Get the store, creating it on first access."""
        if self._store is None:
            from modules.storage.factory import create_store
            self._store = create_store(self._settings)
        return self._store

    @property
    def auth_gate(self) -> "IAuthGate":
        """Get the auth gate instance."""
        if self._auth_gate is None:
            from modules.auth.service import AuthGate
            self._auth_gate = AuthGate(self.store)
        return self._auth_gate

    @property
    def accounts(self) -> "AccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.auth.service import AccountService
            self._account_service = AccountService(self.store)
        return self._account_service

    @property
    def progress(self) -> "IProgressService":
        """Get the progress service instance."""
        if self._progress_service is None:
            from modules.progress.service import ProgressService
            self._progress_service = ProgressService(self.store)
        return self._progress_service

    async def close(self) -> None:
        """Close the store if one was created."""
        if self._store is not None:
            await self._store.close()

    def reset(self) -> None:
        """
        Drop cached services (the store is kept).

        Primarily for tests that swap a service in between requests.
        """
        self._auth_gate = None
        self._account_service = None
        self._progress_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's container."""
    return request.app.state.container


def get_auth_gate(request: Request) -> "IAuthGate":
    """FastAPI dependency for the auth gate."""
    return get_container(request).auth_gate


def get_account_service(request: Request) -> "AccountService":
    """FastAPI dependency for the account service."""
    return get_container(request).accounts


def get_progress_service(request: Request) -> "IProgressService":
    """FastAPI dependency for the progress service."""
    return get_container(request).progress
