"""Global exception handling for the FastAPI application.

Converts exceptions into consistent JSON responses following the
ErrorResponse schema.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from src.domain.exceptions import (
    DomainException,
    NotificationDeliveryError,
    ValidationError,
)
from src.infrastructure.logging.config import get_logger
from src.presentation.schemas.error import ErrorDetail, ErrorResponse


logger = get_logger(__name__)

# Type alias for cleaner function signatures
ExceptionHandler = Callable[[Request, Any], Awaitable[JSONResponse]]


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Handle domain-layer exceptions with appropriate HTTP status codes.

    Maps domain exceptions to REST API responses:
    - ValidationError → 422 Unprocessable Entity
    - NotificationDeliveryError → 502 Bad Gateway
    - Generic DomainException → 400 Bad Request

    Args:
        request: Incoming HTTP request
        exc: Domain exception instance

    Returns:
        JSON response with error details
    """
    logger.warning(
        "domain_exception",
        exception_type=type(exc).__name__,
        code=exc.code,
        message=exc.message,
        path=request.url.path,
    )

    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
    elif isinstance(exc, NotificationDeliveryError):
        status_code = status.HTTP_502_BAD_GATEWAY

    error_response = ErrorResponse(
        error=ErrorDetail(
            code=exc.code,
            message=exc.message,
            details=exc.details,
        )
    )

    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors from request parsing.

    Args:
        request: Incoming HTTP request
        exc: Validation error with detailed error information

    Returns:
        JSON response with validation error details (422 status)
    """
    errors = exc.errors()
    logger.warning(
        "validation_error",
        errors=errors,
        path=request.url.path,
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
                for err in errors
            ],
        )
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_response.model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions as last resort.

    Args:
        request: Incoming HTTP request
        exc: Unhandled exception

    Returns:
        JSON response with generic error message (500 status)
    """
    logger.exception(
        "unhandled_exception",
        exception_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )

    error_response = ErrorResponse(
        error=ErrorDetail(
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred",
            details=None,
        )
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    domain_handler: ExceptionHandler = domain_exception_handler
    app.add_exception_handler(DomainException, domain_handler)
    app.add_exception_handler(ValidationError, domain_handler)
    app.add_exception_handler(NotificationDeliveryError, domain_handler)

    validation_handler: ExceptionHandler = validation_exception_handler
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(PydanticValidationError, validation_handler)

    # Catch-all
    generic_handler: ExceptionHandler = generic_exception_handler
    app.add_exception_handler(Exception, generic_handler)
