"""
Authentication module interfaces.

The credential store is an external collaborator; the auth module only
depends on this protocol. Any implementation (in-memory, Supabase, a fake
in tests) must provide these methods.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthPrincipal


@runtime_checkable
class ICredentialStore(Protocol):
    """
    Registry of username to secret.

    Each call is atomic. Faults are raised as StoreError.
    """

    async def get_user(self, username: str) -> Optional[str]:
        """
        Look up the stored secret for a username.

        Returns:
            The secret, or None if the user does not exist

        Raises:
            StoreError: If the lookup itself fails
        """
        ...

    async def put_user(self, username: str, secret: str) -> None:
        """
        Insert a new user. Never overwrites an existing one.

        Raises:
            DuplicateKeyError: If the username is already stored
            StoreError: If the write fails
        """
        ...


@runtime_checkable
class IAuthGate(Protocol):
    """Decides whether a request's credentials identify a known user."""

    async def authenticate(
        self,
        username: Optional[str],
        key: Optional[str],
        *,
        addr: str = "unknown",
        method: str = "",
        path: str = "",
    ) -> AuthPrincipal:
        """
        Check credentials and return the principal.

        Raises:
            UnauthorizedError: Missing, malformed or mismatched credentials
            InternalError: The credential store failed
        """
        ...
