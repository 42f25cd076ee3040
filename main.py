# ============================================================================
# DKRON JOB PROXY - MAIN APPLICATION
# ============================================================================
# STATUS: Core - FastAPI application entry point
# PURPOSE: HTTP facade relaying job CRUD to a Dkron scheduler
# CREATED: 19 OCT 2026
# ============================================================================
"""
Dkron Job Proxy Main Application

FastAPI application that:
1. Exposes GET/POST /jobs and PUT/DELETE /jobs/{name}
2. Forwards each request to the scheduler's /v1/jobs API
3. Relays the scheduler's status (or an error envelope) to the caller

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE, SERVICE_NAME
from api import (
    router,
    set_client,
    register_error_handlers,
    register_request_logging,
)
from core.config import get_config
from health import health_router
from services import DkronClient

# Configure logging using our structured logging system
from core.logging import configure_logging, get_logger

_config = get_config()
configure_logging(level=_config.log_level, json_output=_config.log_json)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the scheduler client on startup. There is nothing to release on
    shutdown: every upstream call opens and closes its own connection.
    """
    config = get_config()
    logger.info(f"Starting {SERVICE_NAME} v{__version__} (Build {BUILD_DATE})")

    set_client(DkronClient(base_url=config.dkron_url))
    logger.info(f"Relaying jobs to {config.dkron_url}")

    yield

    set_client(None)
    logger.info(f"{SERVICE_NAME} stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Dkron Job Proxy",
        description="Relays job definitions to a Dkron scheduler",
        version=__version__,
        lifespan=lifespan,
    )

    register_request_logging(app)
    register_error_handlers(app)

    # Health probes (no prefix - /livez, /readyz)
    app.include_router(health_router)

    # Job routes
    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": __version__,
            "build_date": BUILD_DATE,
            "upstream": get_config().dkron_url,
            "docs": "/docs",
        }

    return app


app = create_app()


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def run() -> None:
    """Start the HTTP listener."""
    import uvicorn

    config = get_config()
    try:
        uvicorn.run(app, host=config.host, port=config.port)
    except Exception:
        logger.exception("Failed to start server")
        raise


if __name__ == "__main__":
    run()
