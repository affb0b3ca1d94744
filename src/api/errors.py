"""
Callable error handling.

Renders failures in the callable error envelope so clients see a
status such as INTERNAL or INVALID_ARGUMENT and a fixed message,
never the underlying cause.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CallableError(Exception):
    """Error surfaced to the caller of a callable endpoint."""

    def __init__(self, status: str, message: str, http_status: int) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.http_status = http_status


def internal_error(message: str) -> CallableError:
    """Build an INTERNAL callable error."""
    return CallableError("INTERNAL", message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _error_response(http_status: int, error_status: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=http_status,
        content={"error": {"status": error_status, "message": message}},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register callable error envelope handlers on an application."""

    @app.exception_handler(CallableError)
    async def callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
        return _error_response(exc.http_status, exc.status, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed envelope; field contents are never validated
        logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, "INVALID_ARGUMENT", "Bad Request")
