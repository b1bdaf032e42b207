"""HTTP contract of the notification routes."""

from urllib.parse import parse_qs, urlparse


def test_order_notification_link(client, order_notification_payload, store_number):
    response = client.post("/api/notifications/orders", json=order_notification_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["destination"] == store_number
    assert "• Product: Latest Smartphone" in body["message"]
    link = urlparse(body["link"])
    assert link.netloc == "wa.me"
    assert link.path == "/" + store_number.lstrip("+")
    assert parse_qs(link.query)["text"] == [body["message"]]


def test_cancellation_link(client, cancellation_payload):
    response = client.post("/api/notifications/cancellations", json=cancellation_payload)

    assert response.status_code == 200
    assert "*Order ID:* #7" in response.json()["message"]


def test_invalid_cancellation(client, cancellation_payload):
    cancellation_payload["customerPhone"] = "123"

    response = client.post("/api/notifications/cancellations", json=cancellation_payload)

    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid cancellation data",
        "field": "customerPhone",
    }


def test_notifications_do_not_touch_store(client, storage, order_notification_payload):
    client.post("/api/notifications/orders", json=order_notification_payload)

    assert storage.count_orders() == 0
    assert storage.count_products() == 5


def test_invalid_order_notification_phone(client, order_notification_payload):
    order_notification_payload["customerPhone"] = "call me"

    response = client.post("/api/notifications/orders", json=order_notification_payload)

    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid notification data",
        "field": "customerPhone",
    }
