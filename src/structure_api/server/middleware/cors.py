"""
This module configures the Cross-Origin Resource Sharing (CORS) middleware.

Browser front-ends hosted on other origins call the proxy routes with JSON
POST bodies. Allowed origins come from `StructureConfig.cors_origins`
(`STRUCTURE_CORS_ORIGINS`, comma separated). With the default wildcard,
credentialed requests are not allowed: browsers reject `*` combined with
credentials, so they are only enabled for an explicit origin list.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

WILDCARD = "*"


def add_cors_middleware(app: FastAPI, origins: list[str] | None = None) -> None:
    """
    Adds the CORS middleware to the FastAPI application.

    Args:
        app: The `FastAPI` application instance.
        origins: Allowed origins. Defaults to any origin.
    """
    allow_origins = origins or [WILDCARD]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=WILDCARD not in allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
