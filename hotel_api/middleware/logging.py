"""
Hotel API - Request Logging Middleware
========================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status and
       duration under the `hotel_api.access` logger. The correlation id is
       added by the log filter, since this middleware runs inside
       CorrelationIdMiddleware.
Who:   Applied to every request via Starlette middleware.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("hotel_api.access")


def level_for_status(status_code: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log: method, path, status, duration and client address."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        # request.client is None under some test transports
        client = request.client.host if request.client else "unknown"
        entry = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "client_ip": client,
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms",
            entry,
            extra={"data": entry},
        )
        return response
