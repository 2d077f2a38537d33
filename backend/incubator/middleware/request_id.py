"""
Incubator Backend — Request ID Middleware
===========================================

What:  Assigns a correlation ID to each request and echoes it on the response.
Why:   Every log line of one request shares the ID; clients can quote it.
How:   Reuses a client-sent X-Request-ID or generates a short UUID, stores it in
       a ContextVar (for loggers and exception handlers) and on request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests in one thread each see their own ID.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or mint X-Request-ID for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request_id_var.set(rid)
        request.state.request_id = rid
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
