"""Rate limiting and security header middleware.

Rate limiting is per client IP over a rolling window and applies only to
paths under ``prefix`` (default /api/scrape). State is in-process memory.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from time import monotonic
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data:; object-src 'none'; frame-ancestors 'self'"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
}


class RateLimiter:
    """Sliding-window request counter keyed by client id."""

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}

    def hit(self, client_id: str) -> tuple[bool, int, float]:
        """Record a request. Returns (allowed, remaining, retry_after_seconds)."""
        now = self._clock()
        self.prune(now)
        hits = self._hits.setdefault(client_id, deque())

        if len(hits) >= self.max_requests:
            return False, 0, self.window - (now - hits[0])

        hits.append(now)
        return True, self.max_requests - len(hits), 0.0

    def prune(self, now: float | None = None) -> None:
        """Drop expired hits, and clients with nothing left in the window."""
        if now is None:
            now = self._clock()
        for client_id in list(self._hits):
            hits = self._hits[client_id]
            while hits and now - hits[0] >= self.window:
                hits.popleft()
            if not hits:
                del self._hits[client_id]

    def __len__(self) -> int:
        return len(self._hits)

    def reset(self) -> None:
        self._hits.clear()


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: RateLimiter, prefix: str = "/api/scrape") -> None:
        super().__init__(app)
        self.limiter = limiter
        self.prefix = prefix

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(self.prefix):
            return await call_next(request)

        client_id = request.client.host if request.client else "unknown"
        allowed, remaining, retry_after = self.limiter.hit(client_id)
        headers = {
            "RateLimit-Limit": str(self.limiter.max_requests),
            "RateLimit-Remaining": str(remaining),
        }
        if not allowed:
            logger.info("Rate limit exceeded for %s", client_id)
            headers["Retry-After"] = str(max(1, math.ceil(retry_after)))
            return JSONResponse(
                status_code=429,
                content={"error": RATE_LIMIT_MESSAGE},
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
