# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Liveness and readiness probes for the load balancer.
# Readiness goes through the same anon-key client the content routes use,
# so a misconfigured key or missing table shows up here first.
# =============================================================================

from datetime import datetime, timezone
from typing import Callable

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import SupabaseDep
from lib.supabase_client import SupabaseClientError

router = APIRouter()

VERSION = "1.0.0"

# Table and bucket probed by the readiness check
PROBE_RESOURCE = "news"


class HealthResponse(BaseModel):
    """Process health."""
    status: str
    timestamp: str
    environment: str | None = None
    version: str | None = None


class ReadinessResponse(BaseModel):
    """Upstream health, one entry per Supabase service."""
    status: str
    checks: dict[str, str]
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _probe(check: Callable[[], object]) -> str:
    """Run one upstream call and describe the outcome."""
    try:
        check()
    except SupabaseClientError as e:
        return f"unhealthy: {e.message[:50]}"
    return "healthy"


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check():
    """Basic health status for load balancers and monitoring."""
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/live", response_model=HealthResponse, response_model_exclude_none=True)
async def liveness_check():
    return HealthResponse(status="alive", timestamp=_now())


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(db: SupabaseDep):
    """
    Check that Supabase answers a table count and a bucket lookup.

    Status is "ready" when both succeed, "degraded" otherwise.
    """
    checks = {
        "database": _probe(lambda: db.count_rows(PROBE_RESOURCE)),
        "storage": _probe(lambda: db.get_bucket(PROBE_RESOURCE)),
    }

    healthy = all(result == "healthy" for result in checks.values())

    return ReadinessResponse(
        status="ready" if healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )
