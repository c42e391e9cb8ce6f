"""
This module defines the Pydantic models for API responses.

Every Snowflake route answers with HTTP 200 and one of these bodies. The
`status` field tells clients which one they got: "successful" bodies carry the
operation's payload, "unsuccessful" bodies carry only a `reason`.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...warehouse.models import QueryResult


class ErrorResponse(BaseModel):
    """
    Represents a failed operation.

    Attributes:
        status: Always "unsuccessful".
        reason: A human-readable description of what went wrong.
    """

    status: Literal["unsuccessful"] = "unsuccessful"
    reason: str = Field(..., description="Why the operation failed")

    model_config = {"json_schema_extra": {"examples": [{"status": "unsuccessful", "reason": "invalid account"}]}}


class ConnectionResponse(BaseModel):
    """
    Represents a successful connection check.

    Attributes:
        status: Always "successful".
        connection_id: The session identifier Snowflake assigned to the connection.
    """

    status: Literal["successful"] = "successful"
    connection_id: str | None = Field(None, alias="connectionId", description="Snowflake session identifier")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"status": "successful", "connectionId": "8431248502894"}]},
    )


class QueryResponse(BaseModel):
    """Represents a successful query execution."""

    status: Literal["successful"] = "successful"
    response: QueryResult


class RelationPreviewResponse(BaseModel):
    """
    Represents a successful relation preview.

    Attributes:
        status: Always "successful".
        preview: The first rows of the relation.
        columns: The output of `DESCRIBE TABLE` for the relation.
        rowcount: The total number of rows in the relation.
    """

    status: Literal["successful"] = "successful"
    preview: QueryResult
    columns: QueryResult
    rowcount: int | None = None


class HealthResponse(BaseModel):
    """
    Represents the response model for the server health check endpoint.

    Attributes:
        status: The health status of the server (e.g., 'healthy').
        version: The version number of the Structure API application.
        driver_version: The installed snowflake-connector-python version.
        uptime: The uptime of the server in seconds.
    """

    status: str = Field(..., description="Server health status")
    version: str = Field(..., description="Structure API version")
    driver_version: str | None = Field(None, description="snowflake-connector-python version")
    uptime: float | None = Field(None, description="Server uptime in seconds")

    model_config = {"json_schema_extra": {"examples": [{"status": "healthy", "version": "0.1.0", "driver_version": "3.12.0", "uptime": 3600.5}]}}
