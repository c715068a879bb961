"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from quill.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from quill.util.jwt import JWTError

# Most specific first; DomainError is the catch-all for the domain layer
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: Exception) -> int:
    """Resolve the HTTP status code for an application error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_application_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain or token error as ``{"detail": ...}``."""
    status_code = status_for(exc)
    logfire.warn(
        "Request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
    )
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return JSONResponse(
        status_code=status_code, content={"detail": str(exc)}, headers=headers
    )


async def handle_model_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Render use case request validation failures like FastAPI body errors."""
    logfire.warn("Request validation failed", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=422,
        content={
            "detail": jsonable_encoder(
                exc.errors(include_url=False, include_context=False)
            )
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_application_error)
    app.add_exception_handler(JWTError, handle_application_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
