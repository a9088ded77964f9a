"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthPrincipal(BaseModel):
    """
    The authenticated caller of a request.

    Produced by the auth gate after the credentials check succeeds and
    attached to the request state for the rest of that request. Never
    persisted.
    """

    username: str = Field(..., description="Authenticated username")

    model_config = {"frozen": True}
