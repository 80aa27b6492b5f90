"""
Health check router.

Liveness reports the running version. Readiness also checks that the
bundle store answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.interfaces.links.dependencies import get_db_engine
from app.interfaces.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/health/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Readiness check",
    description="Returns 503 while the bundle store is unreachable.",
)
async def readiness_check(engine: AsyncEngine = Depends(get_db_engine)):
    """Return ok once the database answers."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Readiness check failed: %s", type(exc).__name__)
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unavailable", version=settings.version).model_dump(),
        )
    return HealthResponse(status="ok", version=settings.version)
