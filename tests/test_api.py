from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from app.main import create_app


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "pizza-api"}


def test_menu(client):
    response = client.get("/menu")

    assert response.status_code == 200
    menu = response.json()
    assert menu["sizes"] == {
        "small": {"price": 599, "slices": 6},
        "medium": {"price": 899, "slices": 8},
        "large": {"price": 1299, "slices": 12},
    }
    assert menu["crusts"] == ["thin", "thick", "stuffed", "gluten-free"]
    assert "pepperoni" in menu["toppings"]


class TestCreateOrder:

    def test_created(self, client, order_payload):
        response = client.post("/orders", json=order_payload)

        assert response.status_code == 201
        order = response.json()
        assert order["id"]
        assert order["size"] == "medium"
        assert order["toppings"] == ["pepperoni", "mushrooms"]
        assert order["crust"] == "thin"
        assert order["customer_name"] == "John Doe"
        assert order["delivery_address"] == "123 Main St"
        assert order["phone"] == "555-0123"
        assert order["status"] == "pending"
        assert order["estimated_delivery"] == "30-45 minutes"
        assert order["created_at"]

    def test_invalid_size(self, client, order_payload):
        order_payload["size"] = "jumbo"

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Validation Error"
        assert body["fields"] == ["size"]

    def test_missing_customer_name(self, client, order_payload):
        del order_payload["customer_name"]

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 422
        assert response.json()["fields"] == ["customer_name"]

    def test_blank_phone(self, client, order_payload):
        order_payload["phone"] = "  "

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 422
        assert response.json()["fields"] == ["phone"]

    def test_rejected_order_is_not_stored(self, client, order_payload):
        order_payload["crust"] = "cardboard"
        client.post("/orders", json=order_payload)

        assert client.get("/orders").json() == []

    def test_non_object_body(self, client):
        response = client.post("/orders", json=["not", "an", "order"])

        assert response.status_code == 422

    def test_malformed_json(self, client):
        response = client.post(
            "/orders",
            content='{"size": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["fields"] == ["body"]


class TestQueryOrders:

    def test_get_matches_created(self, client, order_payload):
        created = client.post("/orders", json=order_payload).json()

        response = client.get(f"/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown(self, client):
        response = client.get("/orders/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert "nope" in body["detail"]

    def test_list_empty(self, client):
        response = client.get("/orders")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_in_submission_order(self, client, order_payload):
        ids = []
        for name in ["Ana", "Ben", "Cy", "Dee"]:
            order_payload["customer_name"] = name
            ids.append(client.post("/orders", json=order_payload).json()["id"])

        listed = client.get("/orders").json()

        assert [o["id"] for o in listed] == ids
        assert [o["customer_name"] for o in listed] == ["Ana", "Ben", "Cy", "Dee"]

    def test_list_status_filter(self, client, order_payload):
        client.post("/orders", json=order_payload)

        assert len(client.get("/orders", params={"status": "pending"}).json()) == 1

        response = client.get("/orders", params={"status": "delivered"})
        assert response.status_code == 422
        assert response.json()["fields"] == ["status"]


def test_concurrent_submissions(client, order_payload):
    total = 40

    with ThreadPoolExecutor(max_workers=8) as pool:
        responses = list(pool.map(lambda _: client.post("/orders", json=order_payload), range(total)))

    assert [r.status_code for r in responses] == [201] * total
    ids = {r.json()["id"] for r in responses}
    listed = client.get("/orders").json()

    assert len(ids) == total
    assert len(listed) == total
    assert {o["id"] for o in listed} == ids


def test_shutdown_discards_orders(settings, service, order_payload):
    app = create_app(settings=settings, service=service)

    with TestClient(app) as test_client:
        assert test_client.post("/orders", json=order_payload).status_code == 201
        assert service.store.count() == 1

    assert service.store.count() == 0
