"""
This module provides a simple, environment-variable-based logging setup for Structure API.

Debug-level logging across the application is enabled by setting the
`STRUCTURE_DEBUG` environment variable. Handlers and the warehouse adapter log
through standard module loggers; this module only decides where those records
go and at which level. Records are rendered on stderr by `rich`.
"""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s] %(message)s"


def debug_enabled() -> bool:
    """Return True when `STRUCTURE_DEBUG` is set to a truthy value."""
    return os.environ.get("STRUCTURE_DEBUG", "").lower() in ("true", "1", "yes")


def setup_logging(debug: bool | None = None) -> bool:
    """
    Configures the `structure_api` logger hierarchy.

    Args:
        debug: Force debug mode on or off. When None, `STRUCTURE_DEBUG` decides.

    Returns:
        True if debug mode is enabled, False otherwise.
    """
    if debug is None:
        debug = debug_enabled()

    logger = logging.getLogger("structure_api")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if debug:
        sys.stderr.write("[STRUCTURE] Debug mode enabled\n")
    return debug
