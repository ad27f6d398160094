"""
Resource API - Request ID Middleware
=====================================

What:  Generates a unique UUID for each incoming request and returns it in the
       X-Request-ID response header.
How:   Stores the ID in a ContextVar so loggers and exception handlers can
       read it.
When:  Outermost application middleware (runs before all other processing).

Every request gets a new ID, even if the client sent its own
X-Request-ID; the server-side ID is the one that appears in the logs.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = str(uuid.uuid4())
        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response


class RequestIDLogFilter(logging.Filter):
    """
    Adds `request_id` to every log record.

    Attached to the root handler by setup_logging(); records emitted outside
    a request get "-".
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get("") or "-"
        return True
