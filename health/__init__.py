# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# STATUS: Infrastructure - Health probes
# PURPOSE: Kubernetes liveness and readiness probes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Module

- /livez: Process alive (instant, for Kubernetes liveness probe)
- /readyz: Scheduler reachable (one upstream call)

Usage:
    from health import health_router

    app.include_router(health_router)
"""

from health.router import health_router

__all__ = ["health_router"]
