"""Mapping of domain errors to HTTP responses.

Error bodies are {"message": ...}, the shape the web client reads.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from forumhub.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    VoteConflictError,
)

ACCESS_DENIED = "Access Denied! unauthorized user"
INTERNAL_ERROR = "Internal server error"


def to_http_error(error: Exception) -> HTTPException:
    """Translate a domain or validation error raised by a use case.

    Args:
        error: The caught exception

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        logfire.warn("Unauthorized modification attempt", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ACCESS_DENIED)
    if isinstance(error, VoteConflictError):
        logfire.error(
            "Vote conflict", post_id=error.post_id, voter=error.voter
        )
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR
        )
    if isinstance(error, PydanticValidationError):
        detail = "; ".join(err["msg"] for err in error.errors())
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    if isinstance(error, (ValidationError, ValueError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error("Unhandled domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and query strings are client errors (400)."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
    )
    logfire.warn("Request validation failed", path=request.url.path, errors=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message or "Invalid request"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled exception", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the {"message": ...} error handlers on the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
