"""HTTP contract of the order routes."""

import pytest


class TestCreateOrder:
    def test_creates_order(self, client, order_payload):
        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        assert response.json() == {"id": 1, **order_payload}

    def test_notes_default_to_null(self, client, order_payload):
        del order_payload["notes"]

        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        assert response.json()["notes"] is None

    def test_bad_phone_leaves_store_untouched(self, client, storage, order_payload):
        order_payload["customerPhone"] = "12345"

        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid order data", "field": "customerPhone"}
        assert storage.count_orders() == 0

    def test_orphan_product_id_is_accepted(self, client, order_payload):
        order_payload["productId"] = 999

        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        assert response.json()["productId"] == 999

    @pytest.mark.parametrize(
        "email", ["Priya.Sharma@GMAIL.com", "buyer@shop.test", "Orders+Desk@Example.COM"]
    )
    def test_email_is_stored_as_sent(self, client, order_payload, email):
        order_payload["customerEmail"] = email

        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        assert response.json()["customerEmail"] == email
        assert client.get("/api/orders/1").json()["customerEmail"] == email

    def test_malformed_email_rejected(self, client, order_payload):
        order_payload["customerEmail"] = "priya.sharma@"

        response = client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid order data", "field": "customerEmail"}


class TestReadOrders:
    def test_list_and_get(self, client, order_payload):
        created = client.post("/api/orders", json=order_payload).json()

        listed = client.get("/api/orders")
        fetched = client.get(f"/api/orders/{created['id']}")

        assert listed.status_code == 200
        assert listed.json() == [created]
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_empty_list(self, client):
        response = client.get("/api/orders")

        assert response.status_code == 200
        assert response.json() == []

    def test_unknown_order(self, client):
        response = client.get("/api/orders/1")

        assert response.status_code == 404
        assert response.json() == {"message": "Order not found"}

    def test_non_integer_id(self, client):
        assert client.get("/api/orders/first").status_code == 404


def test_strict_store_rejects_orphan_orders(test_config, order_payload):
    from fastapi.testclient import TestClient

    from src.shopease.api.http.app import create_app
    from src.shopease.core.storage import MemStorage

    app = create_app(MemStorage(enforce_product_reference=True), test_config)
    order_payload["productId"] = 999

    with TestClient(app) as client:
        response = client.post("/api/orders", json=order_payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Product 999 does not exist"}
