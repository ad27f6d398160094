"""
Resource API - Request Timing & Logging Middleware
===================================================

What:  Measures each request, adds the X-Response-Time header, and writes one
       structured access log line per request. Exceptions that escape every
       application handler are logged here and answered with a generic 500,
       so that response still carries both correlation headers.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses the request ID for correlation).

Header Format:
    X-Response-Time: 3.141593ms     (six decimals, millisecond suffix)

Log Fields:
    method, path, status, duration_ms, request_id, client_ip

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies or query values
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from resource_api.middleware.request_id import request_id_var

logger = logging.getLogger("resource_api.access")

RESPONSE_TIME_HEADER = "X-Response-Time"

# Liveness probes are timed but not logged
_UNLOGGED_PATHS = {"/healthcheck"}


def unexpected_error_response() -> JSONResponse:
    """Generic 500 for exceptions no application handler claimed."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again or contact support.",
            "request_id": request_id_var.get(""),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Times each request and logs its outcome.

    Log level follows the status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # Still inside RequestIDMiddleware, so the request ID is set
            logger.error(
                "Unhandled error on %s %s", request.method, request.url.path, exc_info=True
            )
            response = unexpected_error_response()

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.6f}ms"

        path = request.url.path
        if path in _UNLOGGED_PATHS:
            return response

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            request.method,
            path,
            status,
            duration_ms,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
