"""
Authentication module exceptions.

These exceptions are raised by the auth module and turned into protocol
error responses by the API error handlers.
"""

from shared.exceptions import AuthenticationError, ConflictError, ValidationError


class UnauthorizedError(AuthenticationError):
    """Raised when credentials are missing, malformed or do not match."""

    def __init__(self, reason: str = "invalid credentials"):
        super().__init__(details={"reason": reason})


class UserExistsError(ConflictError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str):
        super().__init__(details={"username": username})


class InvalidRequestError(ValidationError):
    """Raised when a request body or its fields fail validation."""

    def __init__(self, reason: str = "invalid fields"):
        super().__init__(details={"reason": reason})
