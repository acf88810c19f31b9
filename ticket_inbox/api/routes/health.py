"""
Health check endpoints.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from ticket_inbox.api.deps import get_cache
from ticket_inbox.core.config import settings
from ticket_inbox.repositories.base import SummaryCache

router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """
    Basic health check endpoint.
    Returns application status without touching any dependency.
    """
    return {
        "status": "ok",
        "service": settings.service_name,
        "environment": settings.app_env,
        "timestamp": _now(),
    }


@router.get("/health/ready")
async def readiness_check(cache: SummaryCache = Depends(get_cache)) -> dict[str, Any]:
    """
    Readiness check endpoint.
    Verifies the summary cache store answers.
    """
    checks = {
        "app": True,
        "cache": await cache.ping(),
    }

    all_healthy = all(checks.values())

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks,
        "timestamp": _now(),
    }


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness check endpoint.
    Simple check that the application is running.
    """
    return {"status": "alive"}
