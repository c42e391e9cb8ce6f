"""
This module wraps `snowflake-connector-python` behind a small awaitable API.

The driver is blocking, so every network-bound call (connect, execute, close)
is dispatched to a worker thread with `asyncio.to_thread` and awaited from the
request handler. Each call settles exactly once: it either returns the
driver's result or raises a `WarehouseError` subclass carrying the driver's
message.

Key pieces:
- `build_connection_params` normalizes the credential/attribute mapping handed
  to the driver, dropping optional attributes that are not set.
- `WarehouseConnection` is the per-request handle. Constructing one is
  synchronous and opens nothing; `connect()` authenticates; `execute()` runs
  one statement; `close()` releases the session. It is also an async context
  manager so the connection is released on every exit path.
- `WarehouseClient` builds connections with shared driver options and is what
  the FastAPI routes receive through dependency injection.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any

import snowflake.connector
from snowflake.connector import DictCursor
from snowflake.connector.constants import FIELD_ID_TO_NAME

from ..errors import QueryExecutionError, WarehouseConnectionError
from .models import ColumnInfo, QueryResult, StatementInfo

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Any]


def build_connection_params(
    account: str,
    username: str,
    password: str,
    role: str | None = None,
    warehouse: str | None = None,
) -> dict[str, str]:
    """
    Builds the keyword arguments passed to the driver's `connect`.

    The three credentials are always present. `role` and `warehouse` are only
    included when truthy, so an empty string behaves exactly like an omitted
    value and the account defaults apply.
    """
    params = {
        "account": account,
        "user": username,
        "password": password,
    }
    if role:
        params["role"] = role
    if warehouse:
        params["warehouse"] = warehouse
    return params


def driver_message(error: BaseException) -> str:
    """Extracts the human-readable message from a driver exception."""
    msg = getattr(error, "msg", None)
    if isinstance(msg, str) and msg:
        return msg
    return str(error)


def _column_info(column: Sequence[Any]) -> ColumnInfo:
    # ResultMetadata: name, type_code, display_size, internal_size, precision, scale, is_nullable
    name, type_code, display_size, internal_size, precision, scale, is_nullable = tuple(column)[:7]
    return ColumnInfo(
        name=name,
        type=FIELD_ID_TO_NAME.get(type_code),
        display_size=display_size,
        internal_size=internal_size,
        precision=precision,
        scale=scale,
        nullable=is_nullable,
    )


def _row_values(row: dict[str, Any]) -> dict[str, Any]:
    # BINARY cells arrive as bytearray; render them as Snowflake's default HEX output
    return {key: value.hex().upper() if isinstance(value, (bytes, bytearray)) else value for key, value in row.items()}


class WarehouseConnection:
    """
    One Snowflake session, owned by a single request.

    Args:
        params: Connection parameters, usually from `build_connection_params`.
        connect_fn: The driver's connect callable. Defaults to
                    `snowflake.connector.connect`.
        driver_options: Extra keyword arguments for `connect_fn` (e.g.
                        `login_timeout`).
    """

    def __init__(self, params: dict[str, str], connect_fn: ConnectFn | None = None, **driver_options: Any) -> None:
        self.params = params
        self._connect_fn = connect_fn or snowflake.connector.connect
        self._driver_options = {k: v for k, v in driver_options.items() if v is not None}
        self._conn: Any = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def connect(self) -> None:
        """
        Opens the session.

        Raises:
            WarehouseConnectionError: The driver failed to authenticate or reach
                                      the account.
        """
        try:
            self._conn = await asyncio.to_thread(self._connect_fn, **self.params, **self._driver_options)
        except Exception as e:
            raise WarehouseConnectionError(driver_message(e), cause=e) from e
        logger.debug(f"Opened Snowflake session {self.get_id()} for account {self.params['account']}")

    def get_id(self) -> str | None:
        """Returns the driver-assigned session identifier, or None if not connected."""
        if self._conn is None:
            return None
        session_id = getattr(self._conn, "session_id", None)
        return None if session_id is None else str(session_id)

    async def execute(self, sql_text: str) -> QueryResult:
        """
        Runs one statement and materializes every row.

        Args:
            sql_text: The SQL to execute, passed to the driver unchanged.

        Returns:
            A `QueryResult` with the statement metadata and rows as dictionaries.

        Raises:
            QueryExecutionError: The connection is not open, or the driver
                                 reported a failure.
        """
        if self._conn is None:
            raise QueryExecutionError("Connection is not open")
        try:
            return await asyncio.to_thread(self._run, sql_text)
        except Exception as e:
            raise QueryExecutionError(driver_message(e), cause=e) from e

    def _run(self, sql_text: str) -> QueryResult:
        cursor = self._conn.cursor(DictCursor)
        try:
            cursor.execute(sql_text)
            rows = [_row_values(row) for row in cursor.fetchall()]
            statement = StatementInfo(
                query_id=cursor.sfqid,
                sql_text=sql_text,
                row_count=cursor.rowcount,
                columns=[_column_info(column) for column in cursor.description or []],
            )
        finally:
            cursor.close()
        return QueryResult(statement=statement, rows=rows)

    async def close(self) -> None:
        """Releases the session. Safe to call more than once."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            await asyncio.to_thread(conn.close)
        except Exception as e:
            logger.warning(f"Error closing Snowflake connection: {driver_message(e)}")

    async def __aenter__(self) -> "WarehouseConnection":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class WarehouseClient:
    """
    Factory for `WarehouseConnection` objects sharing driver options.

    Args:
        connect_fn: The driver's connect callable. Tests pass a fake here.
        login_timeout: Optional login timeout in seconds for the driver.
        application: Optional application name reported to Snowflake.
    """

    def __init__(self, connect_fn: ConnectFn | None = None, login_timeout: int | None = None, application: str | None = None) -> None:
        self._connect_fn = connect_fn
        self._driver_options: dict[str, Any] = {"login_timeout": login_timeout, "application": application}

    def build_connection(
        self,
        account: str,
        username: str,
        password: str,
        role: str | None = None,
        warehouse: str | None = None,
    ) -> WarehouseConnection:
        """Creates an unopened connection handle for the given credentials."""
        params = build_connection_params(account, username, password, role=role, warehouse=warehouse)
        return WarehouseConnection(params, connect_fn=self._connect_fn, **self._driver_options)
