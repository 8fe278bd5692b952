"""
Mobile API Backend — Request Logging Middleware
================================================

What:  One access log line per HTTP request on the `mobile_api.access` logger.
How:   Measures duration around call_next and logs method, path, status,
       duration, request ID and client IP. Level follows the status code.

Log line:
    POST /LoginUpScreen 200 84.3ms [1f3a9c0e] from 10.0.2.2

Privacy:
    Request and response bodies are never logged: they carry passwords
    (sign-up, login, reset) and session tokens (login).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mobile_api.middleware.request_id import request_id_var

logger = logging.getLogger("mobile_api.access")

# Probed every few seconds by orchestration; not worth an access line
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    5xx → ERROR, 4xx → WARNING, everything else → INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
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

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
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
