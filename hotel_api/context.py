"""
Hotel API - Request Context
=============================

What:  Per-request correlation id, readable from anywhere in the request's
       call tree without passing it as an argument.
How:   A ContextVar bound by CorrelationIdMiddleware on request entry and
       reset with its token on request exit. Each request runs in its own
       asyncio task with a copied context, so concurrent requests never see
       each other's value.
Who:   Written by the middleware; read by the log filter, the exception
       handlers, and anything else that wants to tag output with the id.
"""

import uuid
from contextvars import ContextVar, Token

# Returned when no request is in flight (startup logs, background work)
UNKNOWN_CORRELATION_ID = "unknown error"

CORRELATION_ID_HEADER = "X-Correlation-ID"
# Header name downstream code sees on the inbound request
REQUEST_CORRELATION_HEADER = "correlation-id"

_correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Current request's correlation id, or UNKNOWN_CORRELATION_ID outside a request."""
    return _correlation_id_var.get() or UNKNOWN_CORRELATION_ID


def bind_correlation_id(correlation_id: str) -> Token:
    """Bind an id to the current context; keep the token for reset_correlation_id()."""
    return _correlation_id_var.set(correlation_id)


def reset_correlation_id(token: Token) -> None:
    """Restore whatever was bound before bind_correlation_id()."""
    _correlation_id_var.reset(token)
