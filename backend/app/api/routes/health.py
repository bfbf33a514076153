"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api always returns 200 if process is up, without touching the database
    - GET /api/ready returns 503 if database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: a database outage must not restart the process
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.schemas.registration import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])

HEALTH_MESSAGE = "Tohf-e-Hayat Backend is running!"


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(message=HEALTH_MESSAGE)


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe, includes database connectivity."""
    manager = getattr(request.app.state, "db_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
