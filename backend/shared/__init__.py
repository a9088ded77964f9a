"""
Shared infrastructure for the kosync backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Error taxonomy base classes
- validation: Field validators for untrusted strings
- logging_config: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    SyncServerError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    InternalError,
    ExternalServiceError,
    StoreError,
    DuplicateKeyError,
    StorageUnavailableError,
)
from .models import AuthPrincipal
from .validation import (
    FIELD_LEN_LIMIT,
    is_valid_field,
    is_valid_key_field,
    get_remote_addr,
)

__all__ = [
    "Settings",
    "get_settings",
    "SyncServerError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "InternalError",
    "ExternalServiceError",
    "StoreError",
    "DuplicateKeyError",
    "StorageUnavailableError",
    "AuthPrincipal",
    "FIELD_LEN_LIMIT",
    "is_valid_field",
    "is_valid_key_field",
    "get_remote_addr",
]
