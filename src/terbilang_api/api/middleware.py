"""API middleware for request logging and error handling."""
from __future__ import annotations
import time
import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = structlog.get_logger(__name__)

# Query options worth seeing in the request log; the number itself is not logged
LOGGED_OPTIONS = ("format", "currency", "case")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with its conversion options and timing.

    Anything a route fails to handle becomes a 500 with a generic body.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        options = {k: request.query_params[k] for k in LOGGED_OPTIONS if k in request.query_params}
        structlog.contextvars.bind_contextvars(path=request.url.path, **options)
        try:
            response = await call_next(request)
            duration = int((time.monotonic() - start) * 1000)
            logger.info("request_served", method=request.method,
                        status=response.status_code, duration_ms=duration)
            return response
        except Exception as e:
            duration = int((time.monotonic() - start) * 1000)
            logger.error("request_failed", method=request.method,
                         error_type=type(e).__name__, error=str(e), duration_ms=duration)
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})
        finally:
            structlog.contextvars.unbind_contextvars("path", *options)
