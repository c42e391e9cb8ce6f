"""
This module defines the Snowflake proxy endpoints.

Each route validates the request body, opens a fresh Snowflake connection with
the supplied credentials, runs one or more statements on it, and reports the
outcome in the body. Routes always answer with HTTP 200; clients inspect the
`status` field to tell success ("successful") from failure ("unsuccessful").
A missing or unreadable body is treated as an empty request.

The connection is scoped to the request: it is closed when the handler returns,
whichever path it returns through.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from ...errors import WarehouseError
from ...validators import validate_connection_params, validate_query_text, validate_relation_params
from ...warehouse.client import WarehouseClient
from ...warehouse.preview import preview_relation
from ..dependencies import get_preview_row_limit, get_warehouse_client
from ..models.request import ConnectionRequest, QueryRequest, RelationPreviewRequest
from ..models.response import ConnectionResponse, ErrorResponse, QueryResponse, RelationPreviewResponse

logger = logging.getLogger(__name__)

CONNECT_ERROR_PREFIX = "Error connecting to Snowflake: "
QUERY_ERROR_PREFIX = "Error executing Snowflake query: "

router = APIRouter(tags=["Snowflake"])


def _failure(prefix: str, error: WarehouseError) -> ErrorResponse:
    err_msg = prefix + error.message
    logger.error(err_msg)
    return ErrorResponse(reason=err_msg)


def _credentials_error(request: ConnectionRequest) -> ErrorResponse | None:
    reason = validate_connection_params(request.account, request.username, request.password)
    return ErrorResponse(reason=reason) if reason else None


@router.post("/", response_model=ConnectionResponse | ErrorResponse)
async def open_connection(
    request: ConnectionRequest | None = None,
    client: WarehouseClient = Depends(get_warehouse_client),
) -> Any:
    """
    Create and validate a Snowflake connection.

    Opens a connection with the supplied credentials and returns the session
    identifier Snowflake assigned to it as confirmation. The connection is
    closed again before the response is sent.
    """
    request = request or ConnectionRequest()
    validation_error = _credentials_error(request)
    if validation_error:
        return validation_error

    async with client.build_connection(
        request.account, request.username, request.password, role=request.role, warehouse=request.warehouse
    ) as connection:
        try:
            await connection.connect()
        except WarehouseError as e:
            return _failure(CONNECT_ERROR_PREFIX, e)

        logger.debug("Successfully connected to Snowflake")
        return ConnectionResponse(connection_id=connection.get_id())


@router.post("/query", response_model=QueryResponse | ErrorResponse)
async def run_query(
    request: QueryRequest | None = None,
    client: WarehouseClient = Depends(get_warehouse_client),
) -> Any:
    """
    Create a Snowflake connection and execute a single query on it.

    The statement is passed to Snowflake unchanged. The response carries the
    statement metadata and every row of the result.
    """
    request = request or QueryRequest()
    validation_error = _credentials_error(request)
    if validation_error:
        return validation_error

    reason = validate_query_text(request.query)
    if reason:
        return ErrorResponse(reason=reason)

    async with client.build_connection(
        request.account, request.username, request.password, role=request.role, warehouse=request.warehouse
    ) as connection:
        try:
            await connection.connect()
            query_result = await connection.execute(request.query)
        except WarehouseError as e:
            return _failure(QUERY_ERROR_PREFIX, e)

    logger.debug("Successfully queried Snowflake")
    return QueryResponse(response=query_result)


@router.post("/relation-preview", response_model=RelationPreviewResponse | ErrorResponse)
async def relation_preview(
    request: RelationPreviewRequest | None = None,
    client: WarehouseClient = Depends(get_warehouse_client),
    row_limit: int = Depends(get_preview_row_limit),
) -> Any:
    """
    Create a Snowflake connection and retrieve a relation preview.

    Returns the top rows of the relation, its column details from
    `DESCRIBE TABLE`, and its total row count. The identifiers are used
    verbatim in the generated SQL and must come from a trusted caller.
    """
    request = request or RelationPreviewRequest()
    validation_error = _credentials_error(request)
    if validation_error:
        return validation_error

    reasons = validate_relation_params(request.database, request.schema_, request.relation)
    if reasons:
        return ErrorResponse(reason=reasons[0])

    async with client.build_connection(
        request.account, request.username, request.password, role=request.role, warehouse=request.warehouse
    ) as connection:
        try:
            await connection.connect()
            result = await preview_relation(connection, request.database, request.schema_, request.relation, row_limit=row_limit)
        except WarehouseError as e:
            return _failure(QUERY_ERROR_PREFIX, e)

    logger.debug("Successfully queried Snowflake")
    return RelationPreviewResponse(preview=result.preview, columns=result.columns, rowcount=result.rowcount)
