import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from core.logging import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per API request with its status and duration"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)

        path = request.url.path
        if path.startswith("/api"):
            duration_ms = (time.perf_counter() - start) * 1000
            line = f"{request.method} {path} {response.status_code} in {duration_ms:.0f}ms"
            if response.status_code >= 400:
                logger.warning(line)
            else:
                logger.info(line)

        return response
