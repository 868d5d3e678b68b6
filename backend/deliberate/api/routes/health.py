"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the SQL store is unreachable (readiness)
    - The in-memory store is always ready

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from deliberate.api.dependencies import get_context
from deliberate.infrastructure.service_context import ServiceContext

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "deliberate-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(context: ServiceContext = Depends(get_context)):
    """Readiness probe — includes database connectivity when the SQL store is used."""
    if context.db is None:
        return {"status": "ready", "checks": {"store": "memory"}}
    db_ok = await context.db.health_check()
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
