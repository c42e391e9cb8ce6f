"""Snowflake driver adapter and the preview pipeline built on it."""

from .client import WarehouseClient, WarehouseConnection, build_connection_params
from .models import ColumnInfo, QueryResult, RelationPreview, StatementInfo
from .preview import DEFAULT_PREVIEW_ROW_LIMIT, build_preview_statements, preview_relation

__all__ = [
    "WarehouseClient",
    "WarehouseConnection",
    "build_connection_params",
    "ColumnInfo",
    "QueryResult",
    "RelationPreview",
    "StatementInfo",
    "DEFAULT_PREVIEW_ROW_LIMIT",
    "build_preview_statements",
    "preview_relation",
]
