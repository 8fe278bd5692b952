"""
Mobile API Backend — Rate Limiting Middleware
==============================================

What:  Per-IP sliding window rate limiter.
How:   Keeps a list of request timestamps per (IP, bucket) in memory.
When:  After the request ID and logging middleware, before any route work;
       429 bodies and access lines therefore carry the request ID.

Buckets:
    auth     POST /SignUpScreen, /LoginUpScreen, /ForgotScreen
             limit: AUTH_RATE_LIMIT_REQUESTS per window; bounds online
             password guessing against a single account
    default  every other path; limit: RATE_LIMIT_REQUESTS per window

Algorithm: Sliding Window Log
    1. Drop timestamps older than the window
    2. If remaining count >= limit, reject with 429 + Retry-After
    3. Otherwise record the current timestamp and continue

Scope:
    State is per process. With several workers each worker enforces its
    own budget.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from mobile_api.config import settings
from mobile_api.exceptions import RateLimitExceededError
from mobile_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

AUTH_PATHS = {"/SignUpScreen", "/LoginUpScreen", "/ForgotScreen"}


class RateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory sliding window rate limiter keyed by client IP and bucket."""

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    # Cleanup of idle keys runs once every this many recorded requests
    CLEANUP_INTERVAL = 1000

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self._requests: Dict[Tuple[str, str], List[float]] = defaultdict(list)
        self._recorded = 0

    @staticmethod
    def _bucket(path: str) -> Tuple[str, int]:
        if path in AUTH_PATHS:
            return "auth", settings.auth_rate_limit_requests
        return "default", settings.rate_limit_requests

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        bucket, limit = self._bucket(path)
        key = (client_ip, bucket)

        now = time.time()
        window_start = now - settings.rate_limit_window

        self._requests[key] = [ts for ts in self._requests[key] if ts > window_start]

        if len(self._requests[key]) >= limit:
            oldest = self._requests[key][0]
            retry_after = int(oldest + settings.rate_limit_window - now) + 1

            logger.warning(
                "Rate limit exceeded for IP %s (%s bucket): %d requests in %ds window",
                client_ip,
                bucket,
                len(self._requests[key]),
                settings.rate_limit_window,
            )
            return self._reject(RateLimitExceededError(retry_after=retry_after))

        self._requests[key].append(now)
        self._recorded += 1
        if self._recorded % self.CLEANUP_INTERVAL == 0:
            self._cleanup_inactive(window_start)

        return await call_next(request)

    @staticmethod
    def _reject(exc: RateLimitExceededError) -> JSONResponse:
        # Raised exceptions do not reach the app's handlers from here, so
        # the 429 body is rendered directly in the shared error format.
        return JSONResponse(
            status_code=429,
            content={
                "error": "rate_limit_exceeded",
                "message": exc.message,
                "details": exc.context,
                "request_id": request_id_var.get(""),
            },
            headers={"Retry-After": str(exc.retry_after)},
        )

    def _cleanup_inactive(self, window_start: float) -> None:
        """Remove keys with no requests inside the current window."""
        inactive = [
            key for key, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] < window_start
        ]
        for key in inactive:
            del self._requests[key]

        if inactive:
            logger.debug("Cleaned up %d inactive rate-limit entries", len(inactive))
