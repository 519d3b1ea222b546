"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ranked_search.core.config import get_settings
from ranked_search.domain.exceptions import RankedSearchException
from ranked_search.shared.telemetry.tracing import get_trace_id, set_span_error

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "UNKNOWN_ENTITY_KIND": 404,
    "INVALID_INPUT": 400,
    "STORE_ERROR": 503,
    "SERVICE_UNAVAILABLE": 503,
}

# Store failures are opaque to clients; the driver detail stays in logs.
_OPAQUE_ERROR_CODES = frozenset({"STORE_ERROR", "SERVICE_UNAVAILABLE"})


def _ranked_search_exception_handler(
    request: Request, exc: RankedSearchException
) -> JSONResponse:
    """Return JSON from RankedSearchException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if exc.error_code in _OPAQUE_ERROR_CODES:
        set_span_error(exc)
        logger.error("Search failed: %s %s", exc.error_code, exc.details)
        content: dict[str, Any] = {"error": exc.error_code, "message": exc.message}
        trace_id = get_trace_id()
        if trace_id:
            content["trace_id"] = trace_id
        return JSONResponse(status_code=status, content=content)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: RankedSearchException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(RankedSearchException, _ranked_search_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
