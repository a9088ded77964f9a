"""
Progress module data models.

Field names on the wire follow the KOReader sync protocol: the document id
travels as ``document`` and the position as ``progress``. Both the wire
names and the attribute names are accepted on input; responses always use
the wire names.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ProgressRecord(BaseModel):
    """
    Reading position of one user in one document.

    ``timestamp`` is assigned by the server on every write; a value sent by
    the client is accepted by the parser and then discarded.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    document_id: StrictStr = Field(..., alias="document", description="Document identifier")
    percentage: float = Field(..., allow_inf_nan=False, description="Fraction or percentage read, client-defined range")
    progress_cursor: StrictStr = Field(..., alias="progress", description="Opaque position within the document")
    device: StrictStr = Field(..., description="Device display name")
    device_id: StrictStr = Field(..., description="Device identifier")
    timestamp: Optional[int] = Field(None, description="Server write time, seconds since epoch")

    def to_wire(self) -> dict:
        """Serialize with protocol field names."""
        return self.model_dump(by_alias=True)


class PushResponse(BaseModel):
    """Response from PUT /syncs/progress."""

    document: str
    timestamp: int


class EmptyProgressResponse(BaseModel):
    """Response from a pull when the document has no stored progress."""

    document: str
