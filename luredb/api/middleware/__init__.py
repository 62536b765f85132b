"""API middleware."""

from luredb.api.middleware.error_handler import ErrorHandlerMiddleware
from luredb.api.middleware.logging import MATCH_TYPE_HEADER, LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware", "MATCH_TYPE_HEADER"]
