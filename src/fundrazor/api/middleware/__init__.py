"""API middleware package."""

from src.fundrazor.api.middleware.errors import register_exception_handlers
from src.fundrazor.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "register_exception_handlers"]
