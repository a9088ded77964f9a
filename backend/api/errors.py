"""
Exception handlers: the response side of the error taxonomy.

Every failure leaves the API as one protocol error body with its HTTP
status. Internal details stay in the logs.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import InternalError, SyncServerError
from modules.auth.exceptions import InvalidRequestError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(error: SyncServerError) -> JSONResponse:
    """Build the public response for a sync error."""
    body = ErrorResponse(**error.to_dict())
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


async def handle_sync_error(request: Request, exc: SyncServerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s - %s (%d): %s",
            request.method, request.url.path, type(exc).__name__, exc.code, exc.details,
        )
    else:
        logger.debug(
            "%s %s - %s (%d)",
            request.method, request.url.path, type(exc).__name__, exc.code,
        )
    return error_response(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    logger.warning("%s %s - invalid request fields: %s", request.method, request.url.path, fields)
    return error_response(InvalidRequestError("request validation failed"))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s - unhandled error", request.method, request.url.path)
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error mapping on an application."""
    app.add_exception_handler(SyncServerError, handle_sync_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
