"""
Application error types and their JSON rendering.
"""
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import is_production

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying the HTTP status it should surface as."""
    status_code = 500

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload or {}

    def to_response(self) -> Dict[str, Any]:
        return {**self.payload, "error": self.message}


class NotFoundError(AppError):
    """Requested protocol or strategy does not exist."""
    status_code = 404


class ValidationError(AppError):
    """Malformed client input (e.g. wallet address)."""
    status_code = 400


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler.

    Full detail always goes to the server log. Clients get a generic message in
    production and the message plus stack trace everywhere else.
    """
    logger.exception(f"Error occurred on {request.method} {request.url.path}: {exc}")

    if is_production():
        content = {"error": "Internal server error"}
    else:
        content = {
            "error": str(exc) or exc.__class__.__name__,
            "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        }
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
