from structure_api.config import get_config
from structure_api.warehouse.client import WarehouseClient

_warehouse_client: WarehouseClient | None = None


def get_warehouse_client() -> WarehouseClient:
    global _warehouse_client
    if _warehouse_client is None:
        config = get_config()
        _warehouse_client = WarehouseClient(login_timeout=config.warehouse.login_timeout, application=config.warehouse.application)
    return _warehouse_client


def get_preview_row_limit() -> int:
    return get_config().preview_row_limit
