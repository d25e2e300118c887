"""
Exception handlers: the single place where errors become HTTP responses.

Domain errors carry a client-safe user_message. Anything unexpected is
logged with its traceback and answered with a generic 500.
"""
# Standard library imports
import logging
from typing import Any, Dict, Sequence

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..core.exceptions import (
    AuthenticationError,
    DuplicateIdentityError,
    NotFoundError,
    SmartSpendError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateIdentityError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def first_error_message(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn pydantic's error list into the message of the first offending field.
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    location = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = str(location[-1]) if location else ""
    error_type = error.get("type", "")
    message = str(error.get("msg", "Invalid request"))

    if error_type == "missing":
        return f"{field} is required" if field else "Request body is required"
    if error_type == "json_invalid":
        return "Malformed JSON body"
    if field == "email" and error_type == "value_error":
        return "Please provide a valid email"
    if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
        return message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
    return f"{field}: {message}" if field else message


async def smartspend_error_handler(request: Request, exc: SmartSpendError) -> JSONResponse:
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_class, mapped_status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_class):
            status_code = mapped_status
            break

    if status_code >= 500:
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": INTERNAL_ERROR_MESSAGE})

    logger.debug(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content={"detail": exc.user_message}, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": first_error_message(exc.errors())},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unexpected error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach all exception handlers to the application"""
    application.add_exception_handler(SmartSpendError, smartspend_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(Exception, unexpected_error_handler)
