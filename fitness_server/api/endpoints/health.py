"""Liveness and readiness probes."""

import time

import structlog
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fitness_server.config import settings
from fitness_server.dependencies import DatabaseSession

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Health"])

STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    uptime_seconds: float


class StoreHealth(BaseModel):
    status: str
    latency_ms: float | None = None


class DetailedHealthResponse(HealthResponse):
    database: StoreHealth


def _base_status(status: str) -> dict:
    return {
        "status": status,
        "version": settings.app_version,
        "environment": settings.environment,
        "uptime_seconds": round(time.monotonic() - STARTED_AT, 1),
    }


@router.get("/health", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    """Process is up; no dependencies are touched."""
    return HealthResponse(**_base_status("healthy"))


@router.get("/health/detailed", response_model=DetailedHealthResponse, summary="Readiness probe")
async def detailed_health_check(db: DatabaseSession) -> DetailedHealthResponse:
    """
    Round-trip the data store.

    Always answers 200; a failed store check reports ``degraded`` so probes
    can tell a slow dependency from a dead process.
    """
    started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("health_store_unreachable", error=str(e))
        return DetailedHealthResponse(
            **_base_status("degraded"), database=StoreHealth(status="unhealthy")
        )

    latency = round((time.perf_counter() - started) * 1000, 2)
    return DetailedHealthResponse(
        **_base_status("healthy"), database=StoreHealth(status="healthy", latency_ms=latency)
    )


@router.get("/ping")
async def ping() -> dict[str, str]:
    return {"message": "pong"}
