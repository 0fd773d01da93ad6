"""
Tests for the synthetic commerce API endpoints.
"""

from unittest.mock import AsyncMock

from errorlab.application.commerce.simulate_delay import SimulateDelayUseCase
from errorlab.interfaces.dependencies import get_simulate_delay_use_case


class TestListEndpoints:
    """Tests for GET /api/orders, /api/users and /api/products."""

    def test_orders_for_user(self, client, telemetry) -> None:
        response = client.get("/api/orders", params={"user": "alice", "count": 2})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["requestId"] == response.headers["X-Request-ID"]
        assert body["data"]["userId"] == "alice"
        assert len(body["data"]["orders"]) == 2
        assert telemetry.named("orders_viewed")[0].distinct_id == "alice"

    def test_orders_default_user(self, client) -> None:
        response = client.get("/api/orders")
        assert response.json()["data"]["userId"] == "anonymous"

    def test_users(self, client) -> None:
        response = client.get("/api/users", params={"limit": 3})
        assert response.json()["data"]["count"] == 3

    def test_products_by_category(self, client) -> None:
        response = client.get(
            "/api/products", params={"category": "sports", "limit": 4}
        )
        products = response.json()["data"]["products"]
        assert len(products) == 4
        assert {p["category"] for p in products} == {"sports"}

    def test_non_numeric_count_is_rejected(self, client) -> None:
        response = client.get("/api/orders", params={"count": "many"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_REQUEST"


class TestSlowEndpoint:
    """Tests for GET /api/slow."""

    def test_delay_capped_at_ten_seconds(self, app, client, telemetry) -> None:
        sleep = AsyncMock()
        app.dependency_overrides[get_simulate_delay_use_case] = (
            lambda: SimulateDelayUseCase(telemetry, sleep=sleep)
        )
        response = client.get("/api/slow", params={"ms": 15000})
        assert response.status_code == 200
        assert response.json()["data"]["delay"] == 10000
        sleep.assert_awaited_once_with(10.0)

    def test_short_delay(self, client) -> None:
        response = client.get("/api/slow", params={"ms": 10})
        assert response.json()["data"] == {"requested": 10, "delay": 10}


class TestRegisterAndPurchase:
    """Tests for POST /api/register and /api/purchase."""

    def test_register(self, client, telemetry) -> None:
        response = client.post(
            "/api/register", json={"name": "Jane", "email": "jane@example.com"}
        )
        assert response.status_code == 201
        user_id = response.json()["data"]["userId"]
        assert telemetry.named("user_signed_up")[0].distinct_id == user_id

    def test_register_rejects_bad_email(self, client) -> None:
        response = client.post("/api/register", json={"name": "Jane", "email": "x"})
        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_purchase(self, client, telemetry) -> None:
        response = client.post(
            "/api/purchase",
            json={"userId": "user_1", "productId": "prod_1", "amount": 49.5},
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["purchaseId"].startswith("pur_")
        assert data["amount"] == 49.5
        assert telemetry.named("purchase_completed")[0].distinct_id == "user_1"

    def test_purchase_rejects_non_positive_amount(self, client) -> None:
        response = client.post(
            "/api/purchase",
            json={"userId": "user_1", "productId": "prod_1", "amount": 0},
        )
        assert response.status_code == 422


class TestBatchEvents:
    """Tests for POST /api/batch-events."""

    def test_hard_cap(self, client, telemetry) -> None:
        response = client.post(
            "/api/batch-events", json={"count": 500, "eventType": "page_view"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["eventsSent"] == 100
        assert len(telemetry.named("page_view")) == 100

    def test_defaults(self, client, telemetry) -> None:
        response = client.post("/api/batch-events")
        data = response.json()["data"]
        assert data == {"requested": 10, "eventsSent": 10, "eventType": "batch_event"}
