"""
Progress sync endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from api.dependencies import get_progress_service
from api.middleware.auth import require_principal
from api.models.errors import ErrorResponse
from shared.models import AuthPrincipal
from modules.auth.exceptions import InvalidRequestError

from .interfaces import IProgressService
from .models import EmptyProgressResponse, ProgressRecord, PushResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/progress/{document}",
    response_model=None,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse, "description": "Invalid document field"},
    },
)
async def get_progress(
    document: str,
    principal: AuthPrincipal = Depends(require_principal),
    service: IProgressService = Depends(get_progress_service),
) -> dict[str, Any]:
    """
    Get the stored reading progress for a document.

    A document with no stored progress is not an error: the response then
    only echoes the document id.
    """
    record = await service.pull(principal, document)
    if record is None:
        return EmptyProgressResponse(document=document).model_dump()
    return record.to_wire()


async def read_progress_body(request: Request) -> ProgressRecord:
    """Parse the push body; called only once the caller is authenticated."""
    try:
        return ProgressRecord.model_validate_json(await request.body())
    except ValidationError as e:
        fields = [".".join(str(part) for part in err.get("loc", ())) for err in e.errors()]
        logger.warning("%s %s - invalid progress fields: %s", request.method, request.url.path, fields)
        raise InvalidRequestError("invalid progress body") from e


@router.put(
    "/progress",
    response_model=PushResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse, "description": "Invalid request"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": ProgressRecord.model_json_schema(by_alias=True)},
            },
        },
    },
)
async def update_progress(
    request: Request,
    principal: AuthPrincipal = Depends(require_principal),
    service: IProgressService = Depends(get_progress_service),
) -> PushResponse:
    """
    Store the reading progress for a document.

    The body is read after authentication, so requests without valid
    credentials are rejected as 401 whatever they carry. The server
    overwrites the timestamp and replaces any previous record for the
    same document.
    """
    record = await read_progress_body(request)
    stored = await service.push(principal, record)
    return PushResponse(document=stored.document_id, timestamp=stored.timestamp)
