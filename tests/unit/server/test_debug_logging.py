"""Tests for the debug logging middleware."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from structure_api.server.middleware.debug_logging import REDACTED, add_debug_logging_middleware, redact


def test_redact_masks_passwords_at_any_depth():
    body = {"account": "acct1", "password": "secret", "nested": [{"Password": "x", "keep": 1}]}

    assert redact(body) == {"account": "acct1", "password": REDACTED, "nested": [{"Password": REDACTED, "keep": 1}]}


def test_middleware_logs_without_leaking_password(capsys):
    app = FastAPI()
    add_debug_logging_middleware(app)

    @app.post("/echo")
    async def echo(body: dict) -> dict:
        return {"account": body["account"]}

    response = TestClient(app).post("/echo", json={"account": "acct1", "password": "hunter2"})

    assert response.status_code == 200
    assert response.json() == {"account": "acct1"}
    err = capsys.readouterr().err
    assert "REQUEST: POST /echo" in err
    assert "acct1" in err
    assert "hunter2" not in err


def test_middleware_disabled():
    app = FastAPI()
    add_debug_logging_middleware(app, debug=False)

    assert app.user_middleware == []
