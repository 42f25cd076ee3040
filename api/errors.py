# ============================================================================
# API ERROR HANDLERS
# ============================================================================
# STATUS: Core - Exception to response mapping
# PURPOSE: Render every failure as an {"error": ...} envelope
# CREATED: 19 OCT 2026
# ============================================================================
"""
API Error Handlers

Two kinds of error reach the caller:
- 400: the inbound job body is not valid JSON or does not fit the job schema
- 500: anything that went wrong talking to the scheduler

Both are rendered as ``{"error": <message>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _describe(errors) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "malformed request body"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exc_handler(request: Request, exc: HTTPException):
        logger.warning(
            f"HTTPException path={request.url.path} status={exc.status_code} detail={exc.detail!r}"
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail) if exc.detail else "HTTP error").model_dump(
                exclude_none=True
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"Invalid request body path={request.url.path} errors={errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(
                ErrorResponse(
                    error=f"Invalid job payload: {_describe(errors)}",
                    details=errors,
                ).model_dump()
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error at path={request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


__all__ = ["register_error_handlers"]
