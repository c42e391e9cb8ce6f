"""
This module defines the command-line interface (CLI) for Structure API.

It uses the `click` library to serve the HTTP API and to run the same
warehouse operations directly from a terminal, rendering results with `rich`.
"""

import asyncio
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import get_config
from .errors import WarehouseConnectionError, WarehouseError
from .my_logging import setup_logging
from .validators import validate_connection_params
from .server.dependencies import get_warehouse_client
from .warehouse.client import WarehouseConnection
from .warehouse.models import QueryResult, RelationPreview
from .warehouse.preview import preview_relation

# Initialize Rich console for pretty output
console = Console()


def credential_options(func: Any) -> Any:
    """Adds the Snowflake credential options shared by the warehouse commands."""
    options = [
        click.option("--account", envvar="SNOWFLAKE_ACCOUNT", help="Snowflake account identifier"),
        click.option("--username", "-u", envvar="SNOWFLAKE_USER", help="Snowflake username"),
        click.option("--password", "-p", envvar="SNOWFLAKE_PASSWORD", help="Snowflake password"),
        click.option("--role", envvar="SNOWFLAKE_ROLE", default=None, help="Role (user default when omitted)"),
        click.option("--warehouse", "-w", envvar="SNOWFLAKE_WAREHOUSE", default=None, help="Warehouse (user default when omitted)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_connection(account: str | None, username: str | None, password: str | None, role: str | None, warehouse: str | None) -> WarehouseConnection:
    validation_error = validate_connection_params(account, username, password)
    if validation_error:
        raise click.UsageError(validation_error)
    return get_warehouse_client().build_connection(account, username, password, role=role, warehouse=warehouse)


def _rows_table(result: QueryResult, title: str | None = None) -> Table:
    table = Table(show_header=True, header_style="bold cyan", title=title)
    column_names = [column.name for column in result.statement.columns]
    if not column_names and result.rows:
        column_names = list(result.rows[0].keys())
    for name in column_names:
        table.add_column(name)
    for row in result.rows:
        table.add_row(*("NULL" if row.get(name) is None else str(row.get(name)) for name in column_names))
    return table


async def _run_query(connection: WarehouseConnection, sql: str) -> QueryResult:
    async with connection:
        await connection.connect()
        return await connection.execute(sql)


async def _run_preview(connection: WarehouseConnection, database: str, schema: str, relation: str, row_limit: int) -> RelationPreview:
    async with connection:
        await connection.connect()
        return await preview_relation(connection, database, schema, relation, row_limit=row_limit)


@click.group()
@click.version_option()
def main() -> None:
    """Structure API - HTTP proxy for Snowflake."""
    pass


@main.command()
@click.option("--host", default=None, help="Host to bind server")
@click.option("--port", default=None, type=int, help="Port to bind server")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the Structure API HTTP server."""
    import uvicorn

    config = get_config()
    host = host or config.server_host
    port = port or config.server_port

    console.print(f"[green]Starting Structure API at http://{host}:{port}[/green]")
    console.print(f"[dim]• Snowflake routes mounted at {config.api_prefix or '/'}[/dim]")
    console.print(f"[dim]• API documentation available at http://{host}:{port}/docs[/dim]")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]\n")

    try:
        uvicorn.run("structure_api.server.app:app", host=host, port=port, reload=reload, log_level="debug" if config.debug else "info")
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")


@main.command()
@click.argument("sql")
@credential_options
def query(sql: str, account: str | None, username: str | None, password: str | None, role: str | None, warehouse: str | None) -> None:
    """Execute a single SQL statement and print the rows."""
    setup_logging()
    connection = _build_connection(account, username, password, role, warehouse)

    try:
        result = asyncio.run(_run_query(connection, sql))
    except WarehouseConnectionError as e:
        raise click.ClickException(f"Error connecting to Snowflake: {e.message}") from e
    except WarehouseError as e:
        raise click.ClickException(f"Error executing Snowflake query: {e.message}") from e

    console.print(_rows_table(result))
    console.print(f"\n[dim]{len(result.rows)} row(s), query id {result.statement.query_id or '-'}[/dim]")


@main.command()
@click.argument("database")
@click.argument("schema")
@click.argument("relation")
@click.option("--limit", "-n", default=None, type=int, help="Number of preview rows")
@credential_options
def preview(
    database: str,
    schema: str,
    relation: str,
    limit: int | None,
    account: str | None,
    username: str | None,
    password: str | None,
    role: str | None,
    warehouse: str | None,
) -> None:
    """Preview a relation: top rows, column details and row count."""
    setup_logging()
    connection = _build_connection(account, username, password, role, warehouse)
    row_limit = limit or get_config().preview_row_limit

    try:
        result = asyncio.run(_run_preview(connection, database, schema, relation, row_limit))
    except WarehouseConnectionError as e:
        raise click.ClickException(f"Error connecting to Snowflake: {e.message}") from e
    except WarehouseError as e:
        raise click.ClickException(f"Error executing Snowflake query: {e.message}") from e

    info_text = Text()
    info_text.append("Relation: ", style="bold")
    info_text.append(f"{database}.{schema}.{relation}\n")
    info_text.append("Row count: ", style="bold")
    info_text.append(f"{result.rowcount}")
    console.print(Panel(info_text, title="Relation Preview", border_style="blue"))

    console.print(_rows_table(result.columns, title="Columns"))
    console.print(_rows_table(result.preview, title=f"First {row_limit} rows"))


if __name__ == "__main__":
    main()
