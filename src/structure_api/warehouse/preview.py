"""
The relation preview: sample rows, column details and row count of one table.

The three statements are built by interpolating the identifiers as given.
Nothing is quoted or escaped, so the database, schema and relation names must
come from a trusted caller.
"""

from typing import NamedTuple

from ..errors import ResultShapeError
from .client import WarehouseConnection
from .models import RelationPreview

DEFAULT_PREVIEW_ROW_LIMIT = 100


class PreviewStatements(NamedTuple):
    rows: str
    describe: str
    count: str


def build_preview_statements(database: str, schema: str, relation: str, row_limit: int = DEFAULT_PREVIEW_ROW_LIMIT) -> PreviewStatements:
    """Returns the three SQL statements used by `preview_relation`."""
    qualified_name = f"{database}.{schema}.{relation}"
    return PreviewStatements(
        rows=f"SELECT * FROM {qualified_name} LIMIT {row_limit};",
        describe=f"DESCRIBE TABLE {qualified_name};",
        count=f"SELECT COUNT(*) AS CNT FROM {qualified_name};",
    )


async def preview_relation(
    connection: WarehouseConnection,
    database: str,
    schema: str,
    relation: str,
    row_limit: int = DEFAULT_PREVIEW_ROW_LIMIT,
) -> RelationPreview:
    """
    Runs the preview statements one after another on an open connection.

    Each statement is awaited before the next is sent; the first failure
    propagates and the remaining statements are not run.

    Raises:
        QueryExecutionError: One of the statements failed.
        ResultShapeError: The count statement returned no rows.
    """
    statements = build_preview_statements(database, schema, relation, row_limit)

    preview = await connection.execute(statements.rows)
    columns = await connection.execute(statements.describe)

    count_result = await connection.execute(statements.count)
    if not count_result.rows:
        raise ResultShapeError("Row count query returned no rows")
    rowcount = count_result.rows[0].get("CNT")

    return RelationPreview(preview=preview, columns=columns, rowcount=rowcount)
