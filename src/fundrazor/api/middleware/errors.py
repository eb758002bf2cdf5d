"""Central exception handlers.

Every error leaves the API as JSON with at least a ``message`` field:

- AppError subclasses -> their own status code (+ ``errors`` for validation)
- request validation failures -> 400 "Validation failed" with field details
- HTTPException -> its status; unmatched routes get "Route <METHOD> <path> not found"
- anything else -> 500, logged with traceback
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.fundrazor.config import Environment, get_settings
from src.fundrazor.core.errors import AppError, ValidationError

logger = structlog.get_logger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    details = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        details.append({
            "path": ".".join(str(part) for part in loc),
            "message": err.get("msg", "Invalid value"),
        })
    return details


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    body: dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        body["errors"] = exc.errors
    if exc.status_code >= 500:
        logger.error("request.app_error", path=request.url.path, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors(exc)
    logger.debug("request.validation_failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request.unhandled_error",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    settings = get_settings()
    message = (
        "Internal server error"
        if settings.ENVIRONMENT == Environment.production
        else str(exc) or "Internal server error"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
