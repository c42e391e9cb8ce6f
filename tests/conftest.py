"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add src to path for all test modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeCursor:
    """Mimics the parts of `snowflake.connector.cursor.DictCursor` the adapter uses."""

    def __init__(self, connection: "FakeSnowflakeConnection"):
        self.connection = connection
        self.sfqid: str | None = None
        self.rowcount: int | None = None
        self.description: list[tuple] = []
        self.closed = False
        self._rows: list[dict[str, Any]] = []

    def execute(self, sql: str) -> "FakeCursor":
        self.connection.executed.append(sql)
        outcome = self.connection.outcomes.pop(0) if self.connection.outcomes else []
        if isinstance(outcome, Exception):
            raise outcome
        self._rows = outcome
        self.sfqid = f"01b2-query-{len(self.connection.executed)}"
        self.rowcount = len(outcome)
        # name, type_code, display_size, internal_size, precision, scale, is_nullable
        self.description = [(name, 2, None, 16777216, None, None, True) for name in (outcome[0] if outcome else {})]
        return self

    def fetchall(self) -> list[dict[str, Any]]:
        return self._rows

    def close(self) -> None:
        self.closed = True


class FakeSnowflakeConnection:
    """Mimics `snowflake.connector.SnowflakeConnection`."""

    def __init__(self, session_id: Any, outcomes: list[Any]):
        self.session_id = session_id
        self.outcomes = outcomes
        self.executed: list[str] = []
        self.closed = False

    def cursor(self, cursor_class: Any = None) -> FakeCursor:
        return FakeCursor(self)

    def close(self) -> None:
        self.closed = True


class FakeDriver:
    """
    Stands in for `snowflake.connector.connect`.

    `outcomes` lists what each successive `execute` returns: a list of row
    dictionaries, or an exception to raise.
    """

    def __init__(self, session_id: Any = "123", outcomes: list[Any] | None = None, connect_error: Exception | None = None):
        self.session_id = session_id
        self.outcomes = outcomes or []
        self.connect_error = connect_error
        self.calls: list[dict[str, Any]] = []
        self.connections: list[FakeSnowflakeConnection] = []

    def __call__(self, **kwargs: Any) -> FakeSnowflakeConnection:
        self.calls.append(kwargs)
        if self.connect_error is not None:
            raise self.connect_error
        connection = FakeSnowflakeConnection(self.session_id, list(self.outcomes))
        self.connections.append(connection)
        return connection

    @property
    def executed(self) -> list[str]:
        return [sql for connection in self.connections for sql in connection.executed]


@pytest.fixture
def fake_driver():
    """A fake Snowflake driver with no queued results."""
    return FakeDriver()


@pytest.fixture
def api_client(fake_driver):
    """A TestClient whose routes talk to `fake_driver` instead of Snowflake."""
    from fastapi.testclient import TestClient

    from structure_api.server.app import app
    from structure_api.server.dependencies import get_warehouse_client
    from structure_api.warehouse.client import WarehouseClient

    app.dependency_overrides[get_warehouse_client] = lambda: WarehouseClient(connect_fn=fake_driver)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def credentials():
    return {"account": "acct1", "username": "u", "password": "p"}


# Add pytest markers for different test types
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "server: mark test as server test")


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Modify test items during collection."""
    # Mark tests based on their location
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "server" in str(item.fspath):
            item.add_marker(pytest.mark.server)
