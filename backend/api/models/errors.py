"""
Error response models.

Error bodies follow the KOReader sync protocol: a numeric code and a
short message.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: int
    message: str
