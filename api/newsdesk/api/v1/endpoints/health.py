"""Health check endpoints for Kubernetes probes."""

from datetime import datetime, timezone
from typing import Dict, Optional

import redis
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from newsdesk.config.settings import settings
from newsdesk.core.logging import get_logger
from newsdesk.db.redis import get_redis_client

logger = get_logger(__name__)

router = APIRouter()

# Track application start time
APP_START_TIME = datetime.now(timezone.utc)


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    uptime_seconds: float = Field(..., description="Application uptime in seconds")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Application environment")


class ReadinessStatus(BaseModel):
    """Readiness check response model."""

    ready: bool = Field(..., description="Whether the application is ready")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    checks: Dict[str, bool] = Field(
        default_factory=dict, description="Individual readiness checks"
    )
    message: Optional[str] = Field(None, description="Additional status message")


@router.get(settings.health_check_path, response_model=HealthStatus)
async def health() -> HealthStatus:
    """Liveness probe."""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()
    return HealthStatus(
        status="healthy",
        uptime_seconds=uptime,
        version=settings.app_version,
        environment=settings.environment.value,
    )


def get_readiness_redis() -> Optional[redis.Redis]:
    """Redis client, or None when Redis is unreachable."""
    try:
        return get_redis_client()
    except redis.RedisError:
        return None


@router.get(settings.readiness_check_path, response_model=ReadinessStatus)
async def readiness(
    response: Response,
    redis_client: Optional[redis.Redis] = Depends(get_readiness_redis),
) -> ReadinessStatus:
    """Readiness probe, checks the Redis connection."""
    redis_ok = False
    if redis_client is not None:
        try:
            redis_ok = bool(redis_client.ping())
        except redis.RedisError as e:
            logger.error(f"Readiness check failed for redis: {e}")

    if not redis_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessStatus(
        ready=redis_ok,
        checks={"redis": redis_ok},
        message=None if redis_ok else "Redis unavailable",
    )
