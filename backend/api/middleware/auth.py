"""
Credential header authentication.

``require_principal`` is the pipeline stage in front of every
authenticated route: it reads x-auth-user / x-auth-key, runs the auth
gate and attaches the principal to the request state. Routes declare it
as a dependency.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from shared.models import AuthPrincipal
from shared.validation import get_remote_addr
from modules.auth.interfaces import IAuthGate

from ..dependencies import get_auth_gate

logger = logging.getLogger(__name__)

AUTH_USER_HEADER = "x-auth-user"
AUTH_KEY_HEADER = "x-auth-key"

# Header extractors (auto_error=False: the gate decides what is missing)
auth_user_scheme = APIKeyHeader(name=AUTH_USER_HEADER, auto_error=False)
auth_key_scheme = APIKeyHeader(name=AUTH_KEY_HEADER, auto_error=False)


def caller_addr(request: Request) -> str:
    """Caller address for logs: proxy header first, then the socket peer."""
    peer = request.client.host if request.client else None
    return get_remote_addr(request.headers, peer)


async def require_principal(
    request: Request,
    username: Optional[str] = Depends(auth_user_scheme),
    key: Optional[str] = Depends(auth_key_scheme),
    gate: IAuthGate = Depends(get_auth_gate),
) -> AuthPrincipal:
    """
    Dependency that requires valid sync credentials.

    Usage:
        @router.get("/protected")
        async def protected_route(principal: AuthPrincipal = Depends(require_principal)):
            return {"user": principal.username}

    Raises:
        UnauthorizedError: Missing or wrong credentials
        InternalError: Credential store failure
    """
    addr = caller_addr(request)
    method = request.method
    path = request.url.path
    logger.info("%s - %s %s", addr, method, path)

    principal = await gate.authenticate(username, key, addr=addr, method=method, path=path)
    request.state.principal = principal
    return principal
