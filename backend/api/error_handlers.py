"""
Global exception handlers.

Every failure leaves the API in the response envelope
``{"success": false, "message": ..., "errors"?: [...]}``.

    - LearnHubException -> its own status code and message
    - RequestValidationError -> 400 "Validation failed" with field errors
    - HTTPException -> its status code and detail
    - Exception (catch-all) -> 500, never leaks internal details

Dependencies: fastapi, backend.core.exceptions, backend.models.common
System role: Error rendering for the HTTP API
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.core.exceptions import LearnHubException
from backend.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(status_code: int, message: str, errors: list[ErrorDetail] | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register LearnHub domain error handler."""

    @app.exception_handler(LearnHubException)
    async def domain_error_handler(request: Request, exc: LearnHubException):
        """Handle all LearnHub domain errors."""
        log = logger.error if exc.status_code >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"path": request.url.path, "status_code": exc.status_code, "details": exc.details},
        )
        return _error_response(exc.status_code, exc.message)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}",
            extra={"errors": len(exc.errors())},
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation failed",
            _build_validation_errors(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTPException raised by FastAPI or Starlette."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing and framework HTTP errors."""
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return _error_response(exc.status_code, message)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def _build_validation_errors(exc: RequestValidationError) -> list[ErrorDetail]:
    """Flatten Pydantic errors into field/message/type entries."""
    return [
        ErrorDetail(
            # Drop the leading "body"/"query"/"path" location segment.
            field=".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]
