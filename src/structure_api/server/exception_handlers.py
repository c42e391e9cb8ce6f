"""
Exception handlers that keep the Snowflake routes on their response contract.

Request models accept any JSON value, so the only body FastAPI still rejects
before a handler runs is one that cannot be parsed at all. Under the Snowflake
prefix that rejection is answered like an empty request: HTTP 200 with an
"unsuccessful" body. Other routes keep FastAPI's default 422.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from ..validators import validate_connection_params
from .models.response import ErrorResponse

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI, api_prefix: str) -> None:
    """
    Registers the request validation handler for routes under `api_prefix`.

    Args:
        app: The `FastAPI` application instance.
        api_prefix: Path prefix the Snowflake router is mounted at.
    """

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
        if not request.url.path.startswith(api_prefix):
            return await request_validation_exception_handler(request, exc)

        logger.debug(f"Unreadable request body on {request.url.path}: {exc.errors()}")
        reason = validate_connection_params(None, None, None)
        return JSONResponse(status_code=200, content=ErrorResponse(reason=reason).model_dump())
