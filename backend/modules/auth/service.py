"""
Authentication service implementation.

AuthGate checks the x-auth-user / x-auth-key pair of every authenticated
request against the credential store. AccountService registers new users.
Neither keeps state between requests.
"""

import hmac
import logging
from typing import Optional

from shared.exceptions import DuplicateKeyError, InternalError, StoreError
from shared.models import AuthPrincipal
from shared.validation import is_valid_field, is_valid_key_field

from .interfaces import IAuthGate, ICredentialStore
from .exceptions import InvalidRequestError, UnauthorizedError, UserExistsError

logger = logging.getLogger(__name__)


def secrets_match(stored: str, presented: str) -> bool:
    """Byte-for-byte comparison of two opaque secrets."""
    return hmac.compare_digest(stored.encode("utf-8"), presented.encode("utf-8"))


class AuthGate(IAuthGate):
    """
    Credential check run before every authenticated handler.

    Malformed credentials are rejected before the store is touched.
    """

    def __init__(self, store: ICredentialStore):
        self._store = store

    async def authenticate(
        self,
        username: Optional[str],
        key: Optional[str],
        *,
        addr: str = "unknown",
        method: str = "",
        path: str = "",
    ) -> AuthPrincipal:
        if not is_valid_field(username) or not is_valid_field(key):
            logger.warning("%s - %s %s - N/A - AUTH - missing or malformed credentials", addr, method, path)
            raise UnauthorizedError("missing or malformed credentials")

        try:
            stored = await self._store.get_user(username)
        except StoreError as e:
            logger.error(
                "%s - %s %s - %s - AUTH - credential lookup failed: %s",
                addr, method, path, username, e.details.get("reason"),
            )
            raise InternalError(details={"operation": e.operation}) from e

        if stored is None or not secrets_match(stored, key):
            logger.warning("%s - %s %s - %s - AUTH - unauthorized", addr, method, path, username)
            raise UnauthorizedError()

        logger.debug("%s - %s %s - %s - AUTH - ok", addr, method, path, username)
        return AuthPrincipal(username=username)


class AccountService:
    """Registers users in the credential store."""

    def __init__(self, store: ICredentialStore):
        self._store = store

    async def create_user(self, username: str, password: str, addr: str = "unknown") -> str:
        """
        Register a new user.

        Args:
            username: Requested username, must be a valid key field
            password: Opaque secret, must be a valid field
            addr: Caller address for the audit log

        Returns:
            The created username

        Raises:
            InvalidRequestError: If either field fails validation
            UserExistsError: If the username is already registered
            InternalError: If the store fails
        """
        if not is_valid_key_field(username) or not is_valid_field(password):
            logger.error("%s - N/A - REGISTER - invalid request", addr)
            raise InvalidRequestError("invalid username or password")

        try:
            existing = await self._store.get_user(username)
            if existing is not None:
                logger.warning("%s - %s - REGISTER - user already exists", addr, username)
                raise UserExistsError(username)
            await self._store.put_user(username, password)
        except DuplicateKeyError as e:
            logger.warning("%s - %s - REGISTER - user created concurrently", addr, username)
            raise UserExistsError(username) from e
        except StoreError as e:
            logger.error(
                "%s - %s - REGISTER - store failure on %s: %s",
                addr, username, e.operation, e.details.get("reason"),
            )
            raise InternalError(details={"operation": e.operation}) from e

        logger.info("%s - %s - REGISTER - ok", addr, username)
        return username
