from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("app.requests")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log in the compact ``METHOD url status length - ms`` layout."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            url,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
        return response
