"""
Exception types raised by the warehouse adapter and the operations built on it.

Request validation problems are not exceptions: validators return the
reason, which handlers send back in an `ErrorResponse`. Everything that goes wrong
while talking to Snowflake is raised as a `WarehouseError` subclass and
translated into the same response shape by the route handlers.
"""


class WarehouseError(Exception):
    """Base class for failures reported while talking to the warehouse."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class WarehouseConnectionError(WarehouseError):
    """Authentication or network failure while opening a connection."""


class QueryExecutionError(WarehouseError):
    """The driver rejected or failed to run a statement."""


class ResultShapeError(WarehouseError):
    """A result set did not have the shape the caller relies on."""
