"""
Mock Location API — Request Logging Middleware
================================================

What:  One log line per HTTP request: method, path, status, duration, request ID.
Why:   The default uvicorn access log has no request ID and no timing.
How:   Wraps call_next with a perf_counter and picks the log level from the
       response status (5xx → ERROR, 4xx → WARNING, otherwise INFO).
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Query strings are logged as part of the path; they only ever carry
page/pageSize, which are not sensitive.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mock_locations.middleware.request_id import request_id_var

logger = logging.getLogger("mock_locations.access")

# Probed every few seconds by container orchestrators
UNLOGGED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        target = f"{path}?{request.url.query}" if request.url.query else path
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            target,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
