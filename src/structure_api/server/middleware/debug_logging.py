"""This module provides a debug logging middleware for FastAPI.

When enabled, this middleware intercepts all incoming requests and outgoing
responses and writes their headers and bodies to stderr. Request bodies of
this API carry Snowflake credentials, so password fields are masked before
anything is written. It is still meant for development only.
"""

import json
import sys
import time
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request, Response

REDACTED = "********"
SENSITIVE_KEYS = {"password", "authorization"}


def redact(value: Any) -> Any:
    """Returns a copy of a decoded JSON value with sensitive fields masked."""
    if isinstance(value, dict):
        return {k: REDACTED if k.lower() in SENSITIVE_KEYS else redact(v) for k, v in value.items()}
    if isinstance(value, list):
        return [redact(item) for item in value]
    return value


def _format_body(body: bytes) -> str:
    try:
        return json.dumps(redact(json.loads(body)), indent=2, default=str)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return f"(raw) {body[:500].decode('utf-8', errors='ignore')}"


def add_debug_logging_middleware(app: FastAPI, debug: bool = True) -> None:
    """
    Adds a debug logging middleware to the FastAPI application.

    Args:
        app: The `FastAPI` application instance.
        debug: A boolean to enable or disable the middleware. Defaults to True.
    """
    if not debug:
        return

    @app.middleware("http")
    async def debug_log_requests(request: Request, call_next: Callable[[Request], Any]) -> Response:
        """Middleware function to log request and response details."""
        sys.stderr.write(f"\n{'=' * 60}\n")
        sys.stderr.write(f"REQUEST: {request.method} {request.url.path}\n")
        sys.stderr.write(f"Headers: {redact(dict(request.headers))}\n")
        if request.method == "POST":
            body = await request.body()
            if body:
                sys.stderr.write(f"Body: {_format_body(body)}\n")

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        sys.stderr.write(f"\nRESPONSE: {response.status_code}\n")
        sys.stderr.write(f"Process Time: {process_time:.3f}s\n")

        # Responses from call_next are streamed; buffer the body to log it and send it on.
        chunks: list[bytes] = []
        async for chunk in response.body_iterator:
            chunks.append(chunk if isinstance(chunk, bytes) else str(chunk).encode("utf-8"))
        response_body = b"".join(chunks)
        if response_body:
            sys.stderr.write(f"Body: {_format_body(response_body)}\n")
        sys.stderr.write(f"{'=' * 60}\n")

        return Response(
            content=response_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
        )
