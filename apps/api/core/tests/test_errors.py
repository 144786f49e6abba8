"""Tests for RFC 7807 error handling."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.core.errors import (
    AppError,
    BadRequestError,
    PayloadTooLargeError,
    register_error_handlers,
)


@pytest.fixture
def error_app():
    """Create a test app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/test/bad-request")
    async def raise_bad_request():
        raise BadRequestError("Unsupported file type")

    @app.get("/test/too-large")
    async def raise_too_large():
        raise PayloadTooLargeError()

    @app.get("/test/custom")
    async def raise_custom():
        raise AppError("Teapot", status_code=418, error_type="https://spendlens.app/errors/teapot")

    @app.get("/test/needs-int")
    async def needs_int(limit: int):
        return {"limit": limit}

    @app.get("/test/unhandled")
    async def raise_unhandled():
        raise RuntimeError("Unexpected crash")

    return app


@pytest.fixture
def client(error_app):
    return TestClient(error_app, raise_server_exceptions=False)


class TestRFC7807ErrorFormat:
    """All errors should return RFC 7807 Problem Details format."""

    def test_bad_request_returns_rfc7807(self, client):
        response = client.get("/test/bad-request")
        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "about:blank"
        assert body["title"] == "Bad Request"
        assert body["status"] == 400
        assert body["detail"] == "Unsupported file type"
        assert body["instance"] == "/test/bad-request"

    def test_payload_too_large_returns_rfc7807(self, client):
        response = client.get("/test/too-large")
        assert response.status_code == 413
        body = response.json()
        assert body["title"] == "Payload Too Large"
        assert body["detail"] == "Payload too large"

    def test_unknown_status_gets_generic_title(self, client):
        response = client.get("/test/custom")
        assert response.status_code == 418
        body = response.json()
        assert body["title"] == "Error"
        assert body["type"] == "https://spendlens.app/errors/teapot"

    def test_missing_route_returns_rfc7807(self, client):
        response = client.get("/test/nowhere")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    def test_request_validation_returns_rfc7807(self, client):
        response = client.get("/test/needs-int", params={"limit": "many"})
        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Unprocessable Entity"
        assert body["detail"].startswith("query.limit")

    def test_unhandled_error_returns_rfc7807(self, client):
        response = client.get("/test/unhandled")
        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred"
