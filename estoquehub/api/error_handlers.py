"""
Centralized error-to-status mapping.

Use cases raise errors from core.exceptions; this module is the only place
that decides which HTTP status each one gets. Error bodies are
{"message": <safe user message>}, except on the legacy /tarefas route which
wraps its own failures as {"error": ...}.
"""

# Standard library imports
import logging
from typing import List, Tuple, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..core.exceptions import (
    AuthError,
    ConflictError,
    DependencyError,
    EstoqueHubError,
    InvalidCredentialsError,
    TokenError,
    ValidationError,
    get_user_message,
)

logger = logging.getLogger(__name__)


# Most specific classes first
_STATUS_BY_ERROR: List[Tuple[Type[BaseException], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_400_BAD_REQUEST),
    (TokenError, status.HTTP_401_UNAUTHORIZED),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (DependencyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: BaseException) -> int:
    """Return the HTTP status for an exception (500 for anything unknown)"""
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Turn pydantic errors into one readable sentence"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request."


async def handle_app_error(request: Request, exc: EstoqueHubError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return JSONResponse(status_code=status_code, content={"message": get_user_message(exc)})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": describe_validation_errors(exc)},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": get_user_message(exc)},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Install the handlers on the application"""
    application.add_exception_handler(EstoqueHubError, handle_app_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(Exception, handle_unexpected_error)
