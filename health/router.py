# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Kubernetes probes for the job proxy
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Router

Endpoints:
    GET /livez   - Liveness probe (is the process alive?)
                   Always 200 while the process serves requests.
                   No upstream call.

    GET /readyz  - Readiness probe (can we relay jobs?)
                   Calls the scheduler status endpoint once.
                   200 if the scheduler answers below 500, 503 otherwise.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from __version__ import __version__, BUILD_DATE
from api.routes import get_client
from services.dkron_client import DkronClient, SchedulerError

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["Health"])


# ============================================================================
# LIVENESS PROBE
# ============================================================================

@health_router.get("/livez")
async def liveness_probe():
    """Kubernetes liveness probe."""
    return {"status": "alive", "version": __version__, "build_date": BUILD_DATE}


# ============================================================================
# READINESS PROBE
# ============================================================================

@health_router.get("/readyz")
def readiness_probe(client: DkronClient = Depends(get_client)):
    """
    Kubernetes readiness probe.

    The proxy is only useful while the scheduler is reachable, so readiness
    is the scheduler's own status endpoint answering without a 5xx.
    """
    try:
        status_code = client.ping()
    except SchedulerError as e:
        logger.warning(f"Scheduler not reachable: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "upstream": client.base_url, "error": str(e)},
        )

    if status_code >= 500:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "upstream": client.base_url,
                "error": f"Scheduler returned {status_code}",
            },
        )

    return {"status": "ready", "upstream": client.base_url}


__all__ = ["health_router"]
