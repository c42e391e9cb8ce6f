"""Liveness endpoint. Reports the server and driver versions without contacting Snowflake."""

import time
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from fastapi import APIRouter

from ... import __version__
from ..models.response import HealthResponse

router = APIRouter(tags=["health"])

_started = time.monotonic()


def _driver_version() -> str | None:
    try:
        return version("snowflake-connector-python")
    except PackageNotFoundError:
        return None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> Any:
    """Returns "healthy" with the API version, the Snowflake driver version and the uptime in seconds."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        driver_version=_driver_version(),
        uptime=time.monotonic() - _started,
    )
