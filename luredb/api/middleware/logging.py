"""
Request logging middleware.

Each request gets a short id that is bound into the log context, so
the `search_complete`, `cache_rebuilt` and `catalog_loaded` events the
core logs while serving it carry the same `request_id`. Search requests
are summarized with their query and the strategy that answered them.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from luredb.config import bind_log_context, clear_log_context, get_logger

logger = get_logger(__name__)

# Set by the search routes; read back here for the request summary
MATCH_TYPE_HEADER = "X-Match-Type"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds a request id and logs one summary event per request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        clear_log_context()
        bind_log_context(request_id=request_id)
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            clear_log_context()
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        summary = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }
        if MATCH_TYPE_HEADER in response.headers:
            summary["query"] = request.query_params.get("q", "")[:50]
            summary["match_type"] = response.headers[MATCH_TYPE_HEADER]

        logger.info("request_completed", **summary)
        clear_log_context()

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response
