"""
Authentication module data models.

Request and response bodies of the /users endpoints.
"""

from pydantic import BaseModel, Field, StrictStr


class CreateUserRequest(BaseModel):
    """Body of POST /users/create."""

    username: StrictStr = Field(..., description="Requested username")
    password: StrictStr = Field(..., repr=False, description="Opaque secret, stored as given")


class CreateUserResponse(BaseModel):
    """Response from account creation."""

    username: str


class AuthorizedResponse(BaseModel):
    """Response from the identity check."""

    authorized: str = "OK"
