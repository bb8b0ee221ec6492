"""
Hotel API - Correlation ID Middleware
=======================================

What:  Generates a correlation id for each incoming request and binds it to
       the request context for the lifetime of that request.
How:   Creates a UUID4, binds it into the ContextVar in hotel_api.context,
       exposes it on request.state and the `correlation-id` request header,
       returns it in the X-Correlation-ID response header, and resets the
       ContextVar when the request finishes.
Who:   Applied to every request via Starlette middleware.
When:  Outermost middleware, so every later layer (access log, body limit,
       routes, exception handlers, repository logs) sees the id.

A fresh id is generated on every request. Client-sent correlation headers
are not trusted.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hotel_api.context import (
    CORRELATION_ID_HEADER,
    REQUEST_CORRELATION_HEADER,
    bind_correlation_id,
    generate_correlation_id,
    reset_correlation_id,
)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a correlation id to each request for tracing.

    Behavior:
        1. Generate a new UUID4
        2. Bind it in the ContextVar (read by loggers throughout the request)
        3. Store it on request.state and in the inbound `correlation-id` header
        4. Add it to the response headers
        5. Unbind it when the request completes, successfully or not
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        cid = generate_correlation_id()
        token = bind_correlation_id(cid)

        # request.state survives into the server-error handler, which runs
        # after this middleware has unbound the ContextVar
        request.state.correlation_id = cid

        # Downstream Request objects are rebuilt from the same scope
        header_name = REQUEST_CORRELATION_HEADER.encode("latin-1")
        request.scope["headers"] = [
            (k, v) for k, v in request.scope["headers"] if k.lower() != header_name
        ] + [(header_name, cid.encode("latin-1"))]

        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)

        response.headers[CORRELATION_ID_HEADER] = cid
        return response
