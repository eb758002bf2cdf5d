"""Typed application errors.

Services raise these; the central exception handlers in
``src.fundrazor.api.middleware.errors`` translate them into JSON responses
with the matching HTTP status code.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base class for errors that map directly onto an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """400 -- client supplied malformed or out-of-range input."""

    status_code = 400

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class NotFoundError(AppError):
    """404 -- referenced entity does not exist."""

    status_code = 404

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource


class UnauthorizedError(AppError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class ForbiddenError(AppError):
    status_code = 403

    def __init__(self, message: str = "Forbidden - Insufficient permissions") -> None:
        super().__init__(message)


class ConflictError(AppError):
    """409 -- e.g. duplicate unique value."""

    status_code = 409


class ServiceUnavailableError(AppError):
    status_code = 503

    def __init__(self, service: str) -> None:
        super().__init__(f"{service} is currently unavailable")
