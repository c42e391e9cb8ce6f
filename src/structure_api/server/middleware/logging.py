"""
Access logging for the Structure API server.

Every request produces one log line with method, path, status and elapsed
time. Server errors are logged at WARNING so they stand out from routine
traffic; the Snowflake routes answer 200 even when the warehouse rejects the
work, so a 5xx here always means the server itself failed. The elapsed time in
seconds is also returned in the `X-Process-Time` header.
"""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"


def add_logging_middleware(app: FastAPI) -> None:
    """Adds the access logging middleware to `app`."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        client = request.client.host if request.client else "-"
        logger.log(level, f"{client} {request.method} {request.url.path} -> {response.status_code} ({elapsed * 1000:.1f} ms)")

        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"
        return response
