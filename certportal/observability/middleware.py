"""
Request middleware.

RequestLoggingMiddleware writes one record per request once the response
status is known; CorrelationMiddleware scopes a correlation ID to the
request and echoes it back in the X-Correlation-ID header.

Dependencies: fastapi, starlette, certportal.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from certportal.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        extra = {
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None,
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            extra["error_type"] = type(e).__name__
            logger.exception(f"{request.method} {request.url.path} failed", extra=extra)
            raise

        extra["status_code"] = response.status_code
        extra["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"{request.method} {request.url.path} -> {response.status_code}", extra=extra)
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for the duration of one request."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
