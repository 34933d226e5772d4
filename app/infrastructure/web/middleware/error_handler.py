"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions as the standard response envelope.
"""

import logging
import traceback
from typing import Any, Dict, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
from fastapi.exceptions import RequestValidationError

from app.config import settings


logger = logging.getLogger(__name__)


def error_envelope(message: str, status_code: int) -> Dict[str, Any]:
    """Build the failure form of the response envelope."""
    return {
        "data": None,
        "statusCode": status_code,
        "message": message,
        "isSuccess": False,
    }


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        # Log the full exception with traceback
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = self.format_error_response(exc)

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exceptionType": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["statusCode"],
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into the response envelope.
        """
        return error_envelope(
            "An unexpected error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Join pydantic field errors into one readable message."""
    parts = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field: Optional[str] = ".".join(location) if location else None
        if field:
            parts.append(f"{field}: {error.get('msg')}")
        else:
            parts.append(str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request-shape violations with 400 and the envelope."""
    message = format_validation_errors(exc)
    logger.warning(f"Request validation failed for {request.method} {request.url.path}: {message}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(message, status.HTTP_400_BAD_REQUEST)
    )
