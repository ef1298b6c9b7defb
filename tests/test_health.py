# File: tests/test_health.py

import logging

import pytest
from fastapi.testclient import TestClient

from app.main import app, create_application


@pytest.fixture
def failing_client():
    """A fresh app with one route that raises an unexpected error."""
    failing_app = create_application()

    @failing_app.get("/boom", include_in_schema=False)
    def boom():
        raise RuntimeError("secret internals")

    return TestClient(failing_app, raise_server_exceptions=False)


def test_health_endpoint():
    resp = TestClient(app).get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_unhandled_error_is_generic_500(failing_client):
    resp = failing_client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error", "code": "internal_error"}
    assert "secret" not in resp.text


def test_requests_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="bookmarks.api")
    TestClient(app).get("/healthz")
    assert any("GET /healthz 200" in r.getMessage() for r in caplog.records)


def test_failed_requests_are_logged(failing_client, caplog):
    caplog.set_level(logging.INFO, logger="bookmarks.api")
    failing_client.get("/boom")
    assert any("GET /boom 500" in r.getMessage() for r in caplog.records)
