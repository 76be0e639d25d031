from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Item not found"
INVALID_BODY_MESSAGE = "Invalid request body"


class AppError(Exception):
    """Base for errors that map straight onto an HTTP response."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Name and quantity are required"


class NotFoundError(AppError):
    status_code = 404
    default_message = NOT_FOUND_MESSAGE


class StoreError(AppError):
    # Raw driver errors stay in the server log; clients only see this message
    status_code = 500
    default_message = "Database error"


class FormatError(AppError):
    """Export rendering failure; answered as plain text, not JSON."""
    status_code = 500
    default_message = "Failed to export"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def install_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, FormatError):
            return PlainTextResponse(exc.message, status_code=exc.status_code)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"Rejected body for {request.method} {request.url.path}: {errors}")
        return _error_response(400, INVALID_BODY_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, AppError.default_message)
