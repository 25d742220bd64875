"""Unit tests for the subscription endpoints."""

from fastapi.testclient import TestClient

from eventnotify.application.services.event_notify_service import EventNotifyService


class TestSubscribe:
    def test_subscribe_created(self, client: TestClient) -> None:
        response = client.post("/api/subscribe", json={"name": "Ana", "channel": "email"})

        assert response.status_code == 201
        body = response.json()
        assert body["total"] == 1
        assert body["subscriber"]["name"] == "Ana"
        assert body["subscriber"]["channel"] == "email"
        assert body["subscriber"]["id"]

    def test_missing_name(self, client: TestClient, service: EventNotifyService) -> None:
        response = client.post("/api/subscribe", json={"channel": "email"})

        assert response.status_code == 400
        assert response.json() == {"error": "name is required"}
        assert service.subscriber_count() == 0

    def test_blank_name(self, client: TestClient) -> None:
        response = client.post("/api/subscribe", json={"name": "   ", "channel": "sms"})

        assert response.status_code == 400
        assert response.json() == {"error": "name is required"}

    def test_invalid_channel(self, client: TestClient, service: EventNotifyService) -> None:
        response = client.post("/api/subscribe", json={"name": "Ana", "channel": "fax"})

        assert response.status_code == 400
        assert "invalid channel" in response.json()["error"]
        assert service.subscriber_count() == 0

    def test_wrong_field_type(self, client: TestClient) -> None:
        response = client.post("/api/subscribe", json={"name": 5, "channel": "email"})

        assert response.status_code == 400
        assert "name" in response.json()["error"]

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/subscribe",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_missing_body(self, client: TestClient) -> None:
        response = client.post("/api/subscribe")

        assert response.status_code == 400
        assert "error" in response.json()


class TestUnsubscribe:
    def test_unsubscribe(self, client: TestClient) -> None:
        created = client.post("/api/subscribe", json={"name": "Ana", "channel": "email"})
        subscriber_id = created.json()["subscriber"]["id"]

        response = client.post("/api/unsubscribe", json={"id": subscriber_id})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "total": 0}

    def test_unknown_id_is_ok(self, client: TestClient) -> None:
        client.post("/api/subscribe", json={"name": "Ana", "channel": "email"})

        response = client.post("/api/unsubscribe", json={"id": "nobody"})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "total": 1}

    def test_missing_id(self, client: TestClient) -> None:
        response = client.post("/api/unsubscribe", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "id is required"}


def test_list_subscribers_in_registration_order(client: TestClient) -> None:
    for name, channel in [("Ana", "email"), ("Bo", "sms"), ("Cy", "push")]:
        client.post("/api/subscribe", json={"name": name, "channel": channel})

    response = client.get("/api/subscribers")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [s["name"] for s in body["subscribers"]] == ["Ana", "Bo", "Cy"]
    assert [s["channel"] for s in body["subscribers"]] == ["email", "sms", "push"]
