# ============================================================================
# REQUEST LOGGING MIDDLEWARE
# ============================================================================
# STATUS: Core - Access logging
# PURPOSE: One log line per relayed request
# CREATED: 19 OCT 2026
# ============================================================================
"""
Request Logging

Logs every inbound request once it has been answered, through the same
context logger the routes use, so the JSON formatter carries method, path,
status and duration as structured data.
"""

import time

from fastapi import FastAPI, Request

from core.logging import get_logger

logger = get_logger("api.request")


def register_request_logging(app: FastAPI) -> None:
    """Attach the access-log middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.exception(
                f"{method} {path} failed after {duration_ms}ms",
                extra={"method": method, "path": path, "duration_ms": duration_ms},
            )
            raise

        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"{method} {path} -> {response.status_code} ({duration_ms}ms)",
            extra={
                "method": method,
                "path": path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


__all__ = ["register_request_logging"]
