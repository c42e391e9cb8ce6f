"""
This module configures and initializes the FastAPI application for Structure API.

It sets up logging, middleware and the API routers, creating a small server
that proxies connection checks, ad-hoc queries and relation previews to
Snowflake.

Key responsibilities include:
- Configuring logging at startup from `STRUCTURE_DEBUG`.
- Configuring middleware for CORS, request logging, and optional debug logging.
- Including the Snowflake router under the configured prefix and the health
  router under `/api/v1`.
- Serving generated API documentation at `/docs` and `/redoc`.
- Providing a root endpoint for basic server information.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..config import get_config
from ..my_logging import setup_logging
from .exception_handlers import add_exception_handlers
from .middleware.cors import add_cors_middleware
from .middleware.debug_logging import add_debug_logging_middleware
from .middleware.logging import add_logging_middleware
from .routes import health, snowflake


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle."""
    setup_logging(debug=get_config().debug)
    yield


config = get_config()

# Create FastAPI application
app = FastAPI(
    title="Structure API",
    description="HTTP proxy for Snowflake connections, queries and relation previews",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add middleware
add_cors_middleware(app, config.cors_origins)
add_logging_middleware(app)
add_debug_logging_middleware(app, debug=config.debug)

# Add exception handlers
add_exception_handlers(app, config.api_prefix)

# Include routers
app.include_router(snowflake.router, prefix=config.api_prefix)
app.include_router(health.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic server information."""
    return {
        "name": "Structure API",
        "version": __version__,
        "description": "Snowflake proxy API",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
    }
