"""
Integration tests for GET /api/health
"""
from datetime import datetime

from fastapi.testclient import TestClient

import app.api.health_endpoints as health_endpoints
from app.config.settings import Settings
from app.main import create_app


def test_health_reports_static_status(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "meo-stationery"
    assert body["version"] == "2.3.4"
    assert body["environment"] == "testing"
    assert body["database"] == "connected"
    assert body["s3"] == "configured"
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert set(body) == {"status", "timestamp", "service", "version", "environment", "database", "s3"}


def test_health_failure_returns_error_document(client, monkeypatch):
    def broken(settings):
        raise RuntimeError("settings unavailable")

    monkeypatch.setattr(health_endpoints, "build_health_document", broken)

    response = client.get("/api/health")

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["error"] == "settings unavailable"
    assert "timestamp" in body


def test_health_failure_without_message(client, monkeypatch):
    def broken(settings):
        raise RuntimeError()

    monkeypatch.setattr(health_endpoints, "build_health_document", broken)

    body = client.get("/api/health").json()

    assert body["error"] == "Unknown error"


def test_health_request_is_instrumented(client, metrics):
    response = client.get("/api/health")

    assert response.headers["X-Request-ID"]
    snapshot = metrics.get_metrics()
    assert snapshot["requests_total_/api/health"] == 1
    assert snapshot["status_200"] == 1


def test_health_echoes_unlisted_node_env(monkeypatch, database, metrics):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("NODE_ENV", "qa")
    settings = Settings(_env_file=None, app_version="2.3.4", database_url="sqlite://", log_format="text")
    app = create_app(settings=settings, database=database, metrics=metrics)

    with TestClient(app) as client:
        body = client.get("/api/health").json()

    assert body["status"] == "healthy"
    assert body["environment"] == "qa"
