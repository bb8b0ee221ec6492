"""Liveness probe: GET /api/v1/ping answers "pong" without touching the database."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/ping", tags=["Health"])


@router.get("", response_class=PlainTextResponse, summary="Liveness probe")
async def ping() -> str:
    return "pong"
