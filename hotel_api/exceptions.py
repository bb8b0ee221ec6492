"""
Hotel API - Application Error Hierarchy
=========================================

What:  Application-specific exceptions, each carrying the HTTP status code
       its response should use.
How:   Repositories and handlers raise these; the exception handlers
       registered in main.py are the only place they are turned into
       `{success: false, message}` responses.
Who:   Raised by the repository and route layers; consumed by main.py.

Exception Hierarchy:
    AppError (base)             → status_code carried on the instance
    ├── BadRequestError         → 400 (not found in repository, operation failed)
    ├── NotFoundError           → 404 (fetch-by-id handler path)
    └── InternalServerError     → 500

Field-level input errors are not part of this hierarchy: pydantic raises
them during request parsing and main.py renders them as a 400 field list
before any handler runs.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     Client-facing description (returned in the response body)
        status_code: HTTP status used by the exception handler
        context:     Extra debug info (logged, never returned to the client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(AppError):
    """
    The request cannot be fulfilled as sent.

    When: The repository cannot find the row it was asked to change, the
          soft-delete transition is not allowed, or a write failed.
    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(self, message: str = "Bad request", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class NotFoundError(AppError):
    """
    The requested resource does not exist.

    When: GET /api/v1/hotel/{id} and the service returned nothing.
    HTTP: 404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class InternalServerError(AppError):
    """Unexpected server-side failure. HTTP: 500."""

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
