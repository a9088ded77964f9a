"""
Authentication module.

Handles credential checks on every authenticated request and account
registration.

Public API:
- ICredentialStore: Interface of the external username -> secret registry
- IAuthGate: Interface of the per-request credential check
- AuthGate, AccountService: Implementations
- Auth exceptions: UnauthorizedError, UserExistsError, InvalidRequestError
"""

from .interfaces import ICredentialStore, IAuthGate
from .models import CreateUserRequest, CreateUserResponse, AuthorizedResponse
from .service import AuthGate, AccountService
from .exceptions import (
    UnauthorizedError,
    UserExistsError,
    InvalidRequestError,
)

__all__ = [
    # Interfaces
    "ICredentialStore",
    "IAuthGate",
    # Models
    "CreateUserRequest",
    "CreateUserResponse",
    "AuthorizedResponse",
    # Services
    "AuthGate",
    "AccountService",
    # Exceptions
    "UnauthorizedError",
    "UserExistsError",
    "InvalidRequestError",
]
