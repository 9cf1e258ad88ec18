import time
from collections import defaultdict, deque
from typing import Callable, Deque, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from core.config import settings
from core.logging import logger

EXEMPT_PATHS = ("/api/health", "/docs", "/openapi.json", "/redoc")

MINUTE = 60
HOUR = 3600
SWEEP_INTERVAL = 300


class SlidingWindowLimiter:
    """Per-key request timestamps checked against a per-minute and a per-hour budget."""

    def __init__(self, per_minute: int, per_hour: int, clock: Callable[[], float] = time.monotonic):
        self.per_minute = per_minute
        self.per_hour = per_hour
        self.clock = clock
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)
        self._last_sweep = clock()

    def _expire(self, hits: Deque[float], now: float):
        while hits and now - hits[0] >= HOUR:
            hits.popleft()

    def _sweep(self, now: float):
        for key in list(self._hits):
            self._expire(self._hits[key], now)
            if not self._hits[key]:
                del self._hits[key]
        self._last_sweep = now

    def hit(self, key: str) -> Optional[str]:
        """Record a request for key. Returns the limit message when it is over budget."""
        now = self.clock()
        if now - self._last_sweep >= SWEEP_INTERVAL:
            self._sweep(now)

        hits = self._hits[key]
        self._expire(hits, now)

        if sum(1 for ts in hits if now - ts < MINUTE) >= self.per_minute:
            return f"Rate limit exceeded: {self.per_minute} requests per minute"
        if len(hits) >= self.per_hour:
            return f"Rate limit exceeded: {self.per_hour} requests per hour"

        hits.append(now)
        return None

    def tracked_keys(self) -> int:
        return len(self._hits)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("X-Real-IP") or (request.client.host if request.client else "unknown")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Answers 429 with Retry-After once a client IP is over its budget."""

    def __init__(
        self,
        app,
        requests_per_minute: int = settings.rate_limit_per_minute,
        requests_per_hour: int = settings.rate_limit_per_hour
    ):
        super().__init__(app)
        self.limiter = SlidingWindowLimiter(requests_per_minute, requests_per_hour)

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        ip = client_ip(request)
        error_msg = self.limiter.hit(ip)
        if error_msg:
            logger.warning(f"{error_msg} for {ip}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"error": error_msg},
                headers={"Retry-After": "60"}
            )

        return await call_next(request)
