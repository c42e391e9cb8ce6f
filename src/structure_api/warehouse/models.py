"""
Pydantic models for results coming back from the warehouse driver.

These are produced by `WarehouseConnection.execute` and embedded verbatim in
API responses, so their field names are the JSON keys clients see.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ColumnInfo(BaseModel):
    """Describes one column of a result set, as reported by the cursor.

    Attributes:
        name: The column name.
        type: The Snowflake type name (e.g. "FIXED", "TEXT"), when known.
        display_size: The display size reported by the driver.
        internal_size: The internal size reported by the driver.
        precision: Precision for numeric columns.
        scale: Scale for numeric columns.
        nullable: Whether the column may contain nulls.
    """

    name: str
    type: str | None = None
    display_size: int | None = None
    internal_size: int | None = None
    precision: int | None = None
    scale: int | None = None
    nullable: bool | None = None


class StatementInfo(BaseModel):
    """Metadata about an executed statement."""

    query_id: str | None = Field(None, alias="queryId")
    sql_text: str = Field(..., alias="sqlText")
    row_count: int | None = Field(None, alias="rowCount")
    columns: list[ColumnInfo] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class QueryResult(BaseModel):
    """The statement metadata together with the materialized rows."""

    statement: StatementInfo
    rows: list[dict[str, Any]] = Field(default_factory=list)


class RelationPreview(BaseModel):
    """Sample rows, column details and total row count of one relation."""

    preview: QueryResult
    columns: QueryResult
    rowcount: int | None = None
