"""
Hotel API - FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn hotel_api.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌───────────────┐ ┌──────────┐ ┌────────────────┐  │
    │  │ Correlation ID│→│ Logging  │→│ Body size limit│  │
    │  └───────────────┘ └──────────┘ └────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌──────────────┐ │
    │  │ /api/v1/ping │ │/api/v1/hotel │ │/api/v2/health│ │
    │  └──────────────┘ └──────────────┘ └──────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ AppError │ HTTP 4xx │ 500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure structured logging, log startup
    Shutdown: dispose database engine (close all connections)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_api import __version__
from hotel_api.config import settings
from hotel_api.context import CORRELATION_ID_HEADER
from hotel_api.database import dispose_engine
from hotel_api.exceptions import AppError
from hotel_api.logging_config import setup_logging
from hotel_api.middleware.body_limit import BodySizeLimitMiddleware
from hotel_api.middleware.correlation import CorrelationIdMiddleware
from hotel_api.middleware.logging import RequestLoggingMiddleware
from hotel_api.routes import api_v1_router, api_v2_router

logger = logging.getLogger(__name__)

# Location markers FastAPI prepends to error locations
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before yield runs on startup, code after yield on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Hotel API starting up on %s:%d", settings.host, settings.port)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Hotel API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic error dicts into `{field, message}` pairs.

    ("body", "name") → "name"; ("body", "address", "city") → "address.city";
    an error on the whole body (missing body, or malformed JSON reported at
    ("body", <char offset>)) → "body".
    """
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if err.get("type") == "json_invalid":
            loc = ["body"]
        elif len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        formatted.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return formatted


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the handlers that turn exceptions into responses.

    Handler hierarchy:
        RequestValidationError → 400 with a field list (handler never ran)
        AppError (and subclasses) → exc.status_code
        HTTPException          → exc.status_code (404 route, 405 method, 413 body)
        Exception (fallback)   → 500

    These handlers are the only place an error becomes a response. Stack
    traces and error context are logged, never returned.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.warning(
            "Request validation failed",
            extra={"data": {"path": request.url.path, "errors": errors}},
        )
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "message": "Validation failed",
                "errors": errors,
            },
        )

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            log_level,
            exc.message,
            extra={
                "data": {
                    "error": type(exc).__name__,
                    "status_code": exc.status_code,
                    "path": request.url.path,
                    **exc.context,
                }
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Router-level errors (unknown path 404, wrong method 405) and the
        body limit's 413, rendered in the `{success, message}` envelope.
        """
        logger.warning(
            str(exc.detail),
            extra={"data": {"status_code": exc.status_code, "path": request.url.path}},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        Runs in Starlette's outermost error middleware, after the
        correlation middleware has unbound its ContextVar and without its
        response header, so the id is read back from request.state.
        """
        correlation_id = getattr(request.state, "correlation_id", None)
        logger.error(
            "Unexpected error: %s",
            str(exc),
            exc_info=True,
            extra={
                "correlation_id": correlation_id,
                "data": {"error": type(exc).__name__, "path": request.url.path},
            },
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"},
            headers={CORRELATION_ID_HEADER: correlation_id} if correlation_id else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Hotel API",
        description="CRUD and soft-delete API for hotel records.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: CorrelationId → RequestLogging → BodySizeLimit
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(api_v1_router)
    app.include_router(api_v2_router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `hotel_api.main:app` to be importable
app = create_app()
