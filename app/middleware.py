"""
Request logging middleware.
Logs method, path, status and duration for every request.
"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("app.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with a level chosen from the response status."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unclassified errors are answered further out, always with a 500
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{request.method} {request.url.path} -> 500 ({duration_ms:.2f}ms)")
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
        )
        return response
