# ============================================================================
# API SCHEMAS
# ============================================================================
# STATUS: Core - Response envelopes
# PURPOSE: Pydantic models for proxy responses
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Schemas

Response envelopes for the job routes. Job bodies themselves use
core.models.Job.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field


MESSAGE_JOB_CREATED = "Job created"
MESSAGE_JOB_UPDATED = "Job updated"
MESSAGE_JOB_DELETED = "Job deleted"


class MessageResponse(BaseModel):
    """Fixed confirmation returned by create/update/delete."""
    message: str = Field(..., examples=[MESSAGE_JOB_CREATED])


class ErrorResponse(BaseModel):
    """Error envelope returned for every client or server error."""
    error: str
    details: Optional[List[Any]] = None


__all__ = [
    "MESSAGE_JOB_CREATED",
    "MESSAGE_JOB_UPDATED",
    "MESSAGE_JOB_DELETED",
    "MessageResponse",
    "ErrorResponse",
]
