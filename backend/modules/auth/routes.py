"""
User endpoints of the sync protocol.

POST /users/create is the only endpoint that works without credentials;
GET /users/auth lets a client validate the credentials it has cached.
"""

import logging

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_account_service
from api.middleware.auth import caller_addr, require_principal
from api.models.errors import ErrorResponse
from shared.models import AuthPrincipal

from .models import AuthorizedResponse, CreateUserRequest, CreateUserResponse
from .service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create",
    response_model=CreateUserResponse,
    status_code=201,
    responses={
        402: {"model": ErrorResponse, "description": "Username is already registered"},
        403: {"model": ErrorResponse, "description": "Invalid request"},
    },
)
async def create_user(
    body: CreateUserRequest,
    request: Request,
    service: AccountService = Depends(get_account_service),
) -> CreateUserResponse:
    """
    Register a new user.

    The password is stored as given; it is never echoed back.
    """
    addr = caller_addr(request)
    logger.info("%s - POST %s", addr, request.url.path)
    username = await service.create_user(body.username, body.password, addr=addr)
    return CreateUserResponse(username=username)


@router.get(
    "/auth",
    response_model=AuthorizedResponse,
    responses={401: {"model": ErrorResponse}},
)
async def auth_user(
    principal: AuthPrincipal = Depends(require_principal),
) -> AuthorizedResponse:
    """
    Confirm the request credentials.

    Requires authentication; has no side effects.
    """
    logger.info("%s - LOGIN", principal.username)
    return AuthorizedResponse(authorized="OK")
