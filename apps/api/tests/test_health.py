"""Tests for the health endpoints."""
from fastapi.testclient import TestClient
from apps.api.main import app

client = TestClient(app)


def test_health_returns_200():
    response = client.get("/api/v1/health")
    assert response.status_code == 200


def test_health_returns_status_ok():
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"


def test_readiness_runs_engine():
    response = client.get("/api/v1/health/ready")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["extraction_engine"] == "up"
    assert data["engine_version"]
