"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 until the universe is generated (readiness)

Design Decisions:
    - Separate liveness/readiness: generating 1M items takes a moment on startup,
      readiness keeps the instance out of rotation until it is done
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from sortview.infrastructure import view_state as view_state_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "sortview-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes view state initialization."""
    state = view_state_module.view_state
    if not state or not state.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "view_state_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"view_state": "healthy"},
        "items": len(state.universe),
        "ordered_contexts": len(state.store.contexts()),
    }
