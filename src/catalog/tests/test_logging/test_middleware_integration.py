# src/catalog/tests/test_logging/test_middleware_integration.py
import json
import logging
import uuid
from types import SimpleNamespace

from fastapi import FastAPI
from starlette.testclient import TestClient

from catalog.core.logging.builder import setup_logging
from catalog.core.logging.middleware import RequestIDMiddleware


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("catalog.test").info("handling hello")
        return {"ok": True}

    return app


def test_request_id_in_response_and_logs(tmp_path, capsys):
    settings = SimpleNamespace(
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=True,
        LOG_DIR=tmp_path / "logs",
        LOG_MAX_BYTES=1000,
        LOG_BACKUP_COUNT=1,
        ENV="production",
        ENABLE_SQL_LOGGING=False,
    )
    setup_logging(settings)

    resp = TestClient(make_app()).get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get("X-Request-ID")
    assert rid is not None

    lines = []
    for line in capsys.readouterr().err.splitlines():
        try:
            lines.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    messages = {rec["message"] for rec in lines if rec.get("request_id") == rid}
    assert "handling hello" in messages
    assert "http.request.completed" in messages


def test_valid_incoming_request_id_is_kept():
    incoming = str(uuid.uuid4())

    resp = TestClient(make_app()).get("/hello", headers={"X-Request-ID": incoming})

    assert resp.headers["X-Request-ID"] == incoming


def test_malformed_incoming_request_id_is_replaced():
    resp = TestClient(make_app()).get("/hello", headers={"X-Request-ID": "not-a-uuid"})

    rid = resp.headers["X-Request-ID"]
    assert rid != "not-a-uuid"
    uuid.UUID(rid)
