"""
Progress module exceptions.
"""

from shared.exceptions import ValidationError


class DocumentFieldMissingError(ValidationError):
    """Raised when the document key of a pull is missing or invalid."""

    default_code = 2004
    default_message = "Field 'document' not provided."

    def __init__(self, document: str = ""):
        super().__init__(details={"document_length": len(document or "")})
