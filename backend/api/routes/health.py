"""
Health check and robots endpoints.

The health check requires sync credentials, so clients can use it to
verify both the server and their stored login in one call.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from shared.models import AuthPrincipal
from ..middleware.auth import caller_addr, require_principal
from ..models.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ROBOTS_TXT = "User-agent: *\nDisallow: /\n"


class HealthResponse(BaseModel):
    """Health check response model."""

    state: str


@router.get(
    "/healthcheck",
    response_model=HealthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def healthcheck(
    principal: AuthPrincipal = Depends(require_principal),
) -> HealthResponse:
    """
    Authenticated liveness check.

    Returns 200 if the API is running and the credentials are valid.
    """
    logger.info("%s - HEALTH CHECK", principal.username)
    return HealthResponse(state="OK")


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots(request: Request) -> str:
    """Disallow all crawlers."""
    logger.info("%s - GET /robots.txt", caller_addr(request))
    return ROBOTS_TXT
