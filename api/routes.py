# ============================================================================
# API ROUTES
# ============================================================================
# STATUS: Core - FastAPI route definitions
# PURPOSE: Job CRUD endpoints relayed to the scheduler
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Routes

Each route makes exactly one call to the scheduler:

    GET    /jobs          -> GET    /v1/jobs
    POST   /jobs          -> POST   /v1/jobs
    PUT    /jobs/{name}   -> PUT    /v1/jobs/{name}
    DELETE /jobs/{name}   -> DELETE /v1/jobs/{name}

Create/update/delete answer with a fixed message and the scheduler's own
status code. Malformed job bodies are rejected with 400 by the validation
handler before the route runs.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response

from core.logging import log_context
from core.models import Job
from services.dkron_client import DkronClient, SchedulerError
from .schemas import (
    MESSAGE_JOB_CREATED,
    MESSAGE_JOB_UPDATED,
    MESSAGE_JOB_DELETED,
    MessageResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Jobs"])


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================
# Set by the main app at startup; created lazily otherwise

_client: Optional[DkronClient] = None


def set_client(client: Optional[DkronClient]) -> None:
    """Set the scheduler client used by the routes."""
    global _client
    _client = client


def get_client() -> DkronClient:
    global _client
    if _client is None:
        _client = DkronClient()
    return _client


def _server_error(exc: Exception) -> HTTPException:
    return HTTPException(status_code=500, detail=str(exc) or type(exc).__name__)


def _message(status_code: int, message: str) -> Response:
    # Bodiless statuses cannot carry the confirmation
    if status_code < 200 or status_code in (204, 304):
        return Response(status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=MessageResponse(message=message).model_dump(),
    )


_ERRORS = {
    400: {"model": ErrorResponse, "description": "Malformed job body"},
    500: {"model": ErrorResponse, "description": "Scheduler unreachable or bad response"},
}


# ============================================================================
# JOBS
# ============================================================================

@router.get("/jobs", response_model=List[Job], responses={500: _ERRORS[500]})
def list_jobs(client: DkronClient = Depends(get_client)):
    """List all jobs known to the scheduler."""
    with log_context(operation="list"):
        try:
            jobs = client.list_jobs()
        except SchedulerError as e:
            logger.error(f"Failed to list jobs: {e}")
            raise _server_error(e)

        logger.info(f"Listed {len(jobs)} jobs")
        return JSONResponse(status_code=200, content=[job.to_upstream() for job in jobs])


@router.post("/jobs", response_model=MessageResponse, responses=_ERRORS)
def create_job(job: Job, client: DkronClient = Depends(get_client)):
    """Forward a new job definition to the scheduler."""
    with log_context(job_name=job.name, operation="create"):
        try:
            status_code = client.create_job(job)
        except SchedulerError as e:
            logger.error(f"Failed to create job: {e}")
            raise _server_error(e)

        return _message(status_code, MESSAGE_JOB_CREATED)


@router.put("/jobs/{name}", response_model=MessageResponse, responses=_ERRORS)
def update_job(name: str, job: Job, client: DkronClient = Depends(get_client)):
    """Replace the named job on the scheduler."""
    with log_context(job_name=name, operation="update"):
        try:
            status_code = client.update_job(name, job)
        except SchedulerError as e:
            logger.error(f"Failed to update job: {e}")
            raise _server_error(e)

        return _message(status_code, MESSAGE_JOB_UPDATED)


@router.delete("/jobs/{name}", response_model=MessageResponse, responses={500: _ERRORS[500]})
def delete_job(name: str, client: DkronClient = Depends(get_client)):
    """Delete the named job from the scheduler."""
    with log_context(job_name=name, operation="delete"):
        try:
            status_code = client.delete_job(name)
        except SchedulerError as e:
            logger.error(f"Failed to delete job: {e}")
            raise _server_error(e)

        return _message(status_code, MESSAGE_JOB_DELETED)


__all__ = ["router", "set_client", "get_client"]
