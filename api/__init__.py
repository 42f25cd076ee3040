# ============================================================================
# API MODULE
# ============================================================================
# STATUS: Core - FastAPI routes
# PURPOSE: HTTP surface for job CRUD
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Module

FastAPI routes, error handlers and request logging for the job proxy.
"""

from .routes import router, set_client, get_client
from .errors import register_error_handlers
from .middleware import register_request_logging
from .schemas import MessageResponse, ErrorResponse

__all__ = [
    "router",
    "set_client",
    "get_client",
    "register_error_handlers",
    "register_request_logging",
    "MessageResponse",
    "ErrorResponse",
]
