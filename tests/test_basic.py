"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health and stats
endpoints respond, and the cross-cutting middleware behaves.
"""

from fastapi.testclient import TestClient

from errorlab.core.config import Settings
from errorlab.main import create_app
from errorlab.shared.security.headers import SECURE_HEADERS
from errorlab.shared.security.rate_limiting import (
    DEFAULT_RATE_LIMIT,
    HEAVY_RATE_LIMIT,
    limiter,
)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self, client) -> None:
        """Health endpoint must return status, timestamp and uptime fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "timestamp" in body
        assert body["uptime"] >= 0


class TestStatsEndpoint:
    """Tests for GET /api/stats."""

    def test_stats_snapshot(self, client) -> None:
        body = client.get("/api/stats").json()
        assert body["success"] is True
        data = body["data"]
        assert data["pid"] > 0
        assert data["threads"] >= 1
        assert "captured" in data["telemetry"]


class TestNotFound:
    """Tests for unmatched routes."""

    def test_unknown_route_returns_envelope(self, client) -> None:
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == "Endpoint not found"
        assert error["requestId"]

    def test_unknown_error_category_is_not_found(self, client) -> None:
        response = client.get("/api/error/quantum/entangled")
        assert response.status_code == 404


class TestMiddleware:
    """Tests for security headers, CORS and request ids."""

    def test_security_headers_present(self, client) -> None:
        response = client.get("/health")
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    def test_request_ids_are_unique(self, client) -> None:
        first = client.get("/health").headers["X-Request-ID"]
        second = client.get("/health").headers["X-Request-ID"]
        assert first.startswith("req_")
        assert first != second

    def test_cors_preflight(self, client) -> None:
        response = client.options(
            "/api/orders",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"


class TestLifespan:
    """Tests for telemetry lifecycle on startup and shutdown."""

    def test_shutdown_flushes_pending_events(self, settings, telemetry) -> None:
        app = create_app(settings=settings, telemetry=telemetry)
        with TestClient(app) as client:
            assert telemetry.opened
            client.post("/api/batch-events", json={"count": 5})
            assert len(telemetry.pending) == 5
            assert not telemetry.closed

        assert telemetry.flushed
        assert telemetry.pending == []
        assert telemetry.closed

    def test_docs_hidden_unless_debug(self, client) -> None:
        assert client.get("/docs").status_code == 404


class TestRateLimiting:
    """Tests for the default and heavy rate limits."""

    def test_default_limit_applies_to_undecorated_routes(self, client) -> None:
        allowed = int(DEFAULT_RATE_LIMIT.split("/")[0])
        for _ in range(allowed):
            assert client.get("/api/users", params={"limit": 1}).status_code == 200

        response = client.get("/api/users", params={"limit": 1})
        assert response.status_code == 429
        error = response.json()["error"]
        assert error["code"] == "RATE_LIMIT_EXCEEDED"
        assert error["requestId"] == response.headers["X-Request-ID"]

    def test_heavy_limit_on_batch_endpoints(self, client) -> None:
        allowed = int(HEAVY_RATE_LIMIT.split("/")[0])
        for _ in range(allowed):
            client.post("/api/batch-events", json={"count": 0})

        response = client.post("/api/batch-events", json={"count": 0})
        assert response.status_code == 429
        assert response.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"


class TestSecurityHeaders:
    """Tests for service-specific header behavior."""

    def test_error_responses_are_not_cached(self, client) -> None:
        assert client.get("/api/error/http/503").headers["Cache-Control"] == "no-store"
        assert "Cache-Control" not in client.get("/health").headers

    def test_docs_skip_csp_in_debug(self, telemetry) -> None:
        settings = Settings(posthog_project_key="", log_level="WARNING", debug=True)
        limiter.reset()
        client = TestClient(create_app(settings=settings, telemetry=telemetry))
        docs = client.get("/docs")
        assert docs.status_code == 200
        assert "Content-Security-Policy" not in docs.headers
        assert client.get("/health").headers["Content-Security-Policy"]
