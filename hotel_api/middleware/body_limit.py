"""
Hotel API - Request Body Size Limit
=====================================

What:  Rejects requests whose body is larger than MAX_BODY_SIZE (16 KB by
       default) with 413 and the standard `{success, message}` envelope.
How:   Two checks, as a pure ASGI middleware:
         1. Declared size: a Content-Length above the limit is answered
            before the app runs.
         2. Actual size: `receive` is wrapped with a byte counter, so
            chunked bodies (no Content-Length) are cut off as soon as the
            running total passes the limit. The counter raises
            HTTPException(413), which the app's HTTPException handler
            renders like any other error.
Who:   Applied to every HTTP request.
"""

import logging

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from hotel_api.config import settings

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """Answers 413 Payload Too Large for oversized request bodies."""

    def __init__(self, app: ASGIApp, max_body_size: int = settings.max_body_size) -> None:
        self.app = app
        self.max_body_size = max_body_size

    @property
    def too_large_message(self) -> str:
        return f"Request body too large. Maximum size is {self.max_body_size} bytes."

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                response = JSONResponse(
                    status_code=400,
                    content={"success": False, "message": "Invalid Content-Length header"},
                )
                await response(scope, receive, send)
                return

            if declared > self.max_body_size:
                logger.warning(
                    "Request body too large",
                    extra={"data": {"content_length": declared, "limit": self.max_body_size}},
                )
                response = JSONResponse(
                    status_code=413,
                    content={"success": False, "message": self.too_large_message},
                )
                await response(scope, receive, send)
                return

        received = 0

        async def receive_limited() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    logger.warning(
                        "Request body too large",
                        extra={"data": {"received": received, "limit": self.max_body_size}},
                    )
                    raise HTTPException(status_code=413, detail=self.too_large_message)
            return message

        await self.app(scope, receive_limited, send)
