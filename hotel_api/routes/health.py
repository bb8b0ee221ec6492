"""
Hotel API - Health Check Route
================================

What:  GET /api/v2/health for monitoring and load balancer probes.
How:   Runs SELECT 1 against the database and reports the result alongside
       the usual envelope. Always answers 200 so the process stays
       reachable for diagnosis while the database is down.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text

from hotel_api.database import engine
from hotel_api.schemas.hotel import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        message="app is running all good and fine",
        database=db_status,
    )
