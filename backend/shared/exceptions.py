"""
Base exception classes for the kosync backend.

Each module defines its own exceptions on top of these bases. Every error
carries the numeric code of the KOReader sync protocol, a fixed public
message and the HTTP status the API layer answers with.
"""

from typing import Optional, Any


class SyncServerError(Exception):
    """
    Base exception for all kosync errors.

    The public message is what clients see; ``details`` is kept for logs
    and is never serialized into a response.
    """

    status_code: int = 502
    default_code: int = 2000
    default_message: str = "Unknown server error."

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code if code is not None else self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the public response body."""
        return {
            "code": self.code,
            "message": self.message,
        }


class ValidationError(SyncServerError):
    """Input validation failed."""

    status_code = 403
    default_code = 2003
    default_message = "Invalid request"


class AuthenticationError(SyncServerError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401
    default_code = 2001
    default_message = "Unauthorized"


class ConflictError(SyncServerError):
    """Resource already exists."""

    status_code = 402
    default_code = 2002
    default_message = "Username is already registered."


class InternalError(SyncServerError):
    """Any store or unexpected fault. Never exposes its cause."""

    pass


class ExternalServiceError(SyncServerError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: Optional[str] = None,
        service: str = "unknown",
        code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """A store read or write failed. Handlers surface it as InternalError."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        super().__init__(
            service="store",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation


class DuplicateKeyError(StoreError):
    """An insert hit a key that already exists."""

    pass


class StorageUnavailableError(ExternalServiceError):
    """The configured store backend cannot be created or reached."""

    default_code = 1000
    default_message = "Cannot connect to storage backend."

    def __init__(self, backend: str, reason: Optional[str] = None):
        super().__init__(
            service=backend,
            details={"reason": reason} if reason else None,
        )
