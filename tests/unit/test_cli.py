"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from structure_api import cli
from structure_api.warehouse.client import WarehouseClient

CREDENTIALS = ["--account", "acct1", "--username", "u", "--password", "p"]


@pytest.fixture
def runner(fake_driver, monkeypatch):
    monkeypatch.setattr(cli, "get_warehouse_client", lambda: WarehouseClient(connect_fn=fake_driver))
    for var in ("SNOWFLAKE_ACCOUNT", "SNOWFLAKE_USER", "SNOWFLAKE_PASSWORD", "SNOWFLAKE_ROLE", "SNOWFLAKE_WAREHOUSE"):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()


def test_query_prints_rows(runner, fake_driver):
    fake_driver.outcomes = [[{"NAME": "DEMO_DB"}]]

    result = runner.invoke(cli.main, ["query", "SHOW DATABASES;", *CREDENTIALS])

    assert result.exit_code == 0, result.output
    assert "DEMO_DB" in result.output
    assert "1 row(s)" in result.output
    assert fake_driver.executed == ["SHOW DATABASES;"]
    assert fake_driver.connections[0].closed


def test_query_reads_credentials_from_env(runner, fake_driver):
    fake_driver.outcomes = [[{"X": 1}]]

    result = runner.invoke(
        cli.main,
        ["query", "SELECT 1 AS X;", "--role", "ANALYST"],
        env={"SNOWFLAKE_ACCOUNT": "acct1", "SNOWFLAKE_USER": "u", "SNOWFLAKE_PASSWORD": "p"},
    )

    assert result.exit_code == 0, result.output
    assert fake_driver.calls[0]["account"] == "acct1"
    assert fake_driver.calls[0]["role"] == "ANALYST"


def test_query_missing_credentials(runner, fake_driver):
    result = runner.invoke(cli.main, ["query", "SELECT 1;", "--account", "acct1"])

    assert result.exit_code == 2
    assert "invalid username" in result.output
    assert fake_driver.calls == []


def test_query_failure(runner, fake_driver):
    fake_driver.outcomes = [RuntimeError("Object 'NOPE' does not exist")]

    result = runner.invoke(cli.main, ["query", "SELECT * FROM NOPE;", *CREDENTIALS])

    assert result.exit_code == 1
    assert "Error executing Snowflake query: Object 'NOPE' does not exist" in result.output


def test_query_connect_failure(runner, fake_driver):
    fake_driver.connect_error = RuntimeError("Incorrect username or password")

    result = runner.invoke(cli.main, ["query", "SELECT 1;", *CREDENTIALS])

    assert result.exit_code == 1
    assert "Error connecting to Snowflake: Incorrect username or password" in result.output


def test_preview(runner, fake_driver):
    fake_driver.outcomes = [[{"ID": 7}], [{"name": "ID", "type": "NUMBER(38,0)"}], [{"CNT": 3}]]

    result = runner.invoke(cli.main, ["preview", "DB", "PUBLIC", "ORDERS", "--limit", "5", *CREDENTIALS])

    assert result.exit_code == 0, result.output
    assert "DB.PUBLIC.ORDERS" in result.output
    assert "Row count: 3" in result.output
    assert fake_driver.executed[0] == "SELECT * FROM DB.PUBLIC.ORDERS LIMIT 5;"
