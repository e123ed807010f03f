"""
Error types and the centralized error responder.

Every failure path ends in one of the handlers registered here, and every
error response has the same shape: ``{"error": <message>}``.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_STATUS = status.HTTP_500_INTERNAL_SERVER_ERROR
DEFAULT_MESSAGE = "Something went wrong!"


class PasteAPIError(Exception):
    """Structured error carrying the HTTP status and the client-facing message."""

    def __init__(self, message: str = DEFAULT_MESSAGE, status: int = DEFAULT_STATUS):
        self.message = message
        self.status = status
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class ValidationError(PasteAPIError):
    """The request body failed a required-field check."""

    def __init__(self, message: str):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class NotFoundError(PasteAPIError):
    """The requested paste or route does not exist."""

    def __init__(self, message: str):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class PayloadTooLargeError(PasteAPIError):
    """The request body exceeds the configured limit."""

    def __init__(self, message: str = "request entity too large"):
        super().__init__(message, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)


def original_url(request: Request) -> str:
    """Request path plus query string, as the client sent it."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _log_error(request: Request, status_code: int, exc: Exception) -> None:
    if status_code >= 500:
        logger.error(f"{request.method} {original_url(request)} failed: {exc!r}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {original_url(request)} -> {status_code}: {exc!r}")


def register_error_handlers(app: FastAPI) -> None:
    """Register the error responder on the FastAPI app."""

    @app.exception_handler(PasteAPIError)
    async def paste_api_error_handler(request: Request, exc: PasteAPIError):
        """Structured errors: respond with their own status and message."""
        _log_error(request, exc.status, exc)
        return error_response(exc.status, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def route_error_handler(request: Request, exc: StarletteHTTPException):
        """Unmatched path or method: the fallback not-found response."""
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            exc = NotFoundError(f"Not found: {original_url(request)}")
            _log_error(request, exc.status, exc)
            return error_response(exc.status, exc.message)

        _log_error(request, exc.status_code, exc)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unclassified_error_handler(request: Request, exc: Exception):
        """Anything else: default status and message, details only in the log."""
        _log_error(request, DEFAULT_STATUS, exc)
        return error_response(DEFAULT_STATUS, DEFAULT_MESSAGE)
