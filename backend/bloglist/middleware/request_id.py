"""
Bloglist Backend - Request ID Middleware
=========================================

What:  Assigns a correlation id to each request and echoes it in the response.
How:   Reuses the client's X-Request-ID header when present, otherwise a short
       UUID; stores it in a ContextVar for loggers and exception handlers.
Who:   Applied to every request via Starlette middleware.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if sent
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in request_id_var and request.state.request_id
        4. Add X-Request-ID to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
