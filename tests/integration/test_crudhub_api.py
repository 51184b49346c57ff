"""End-to-end tests through the HTTP API with a fresh in-memory database."""

import httpx
import pytest

from src.crudhub.core.services import LocalPaymentProvider


def _register_and_login(client, email="ada@example.com", password="s3cret-pass"):
    client.post("/api/auth/register", json={"email": email, "password": password})
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    return response.json()["access_token"]


class TestHealth:
    def test_liveness(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["checks"]["database"] == {
            "status": "healthy",
            "type": "sqlite",
        }


class TestRequestTracing:
    def test_request_id_is_generated(self, client):
        response = client.get("/health")
        assert response.headers["X-Request-ID"]

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    def test_error_envelope_carries_request_id(self, client):
        response = client.get("/api/products/missing", headers={"X-Request-ID": "req-7"})
        assert response.json()["request_id"] == "req-7"

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestProducts:
    def test_create_list_and_get(self, client):
        created = client.post(
            "/api/products", json={"name": "Mug", "price": 9.5, "description": "Blue"}
        )
        assert created.status_code == 201
        product = created.json()

        listed = client.get("/api/products").json()
        assert [p["id"] for p in listed] == [product["id"]]

        fetched = client.get(f"/api/products/{product['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Mug"
        assert fetched.json()["price"] == 9.5

    def test_empty_catalog(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_pagination(self, client):
        ids = [
            client.post("/api/products", json={"name": f"P{i}", "price": i}).json()["id"]
            for i in range(3)
        ]
        page = client.get("/api/products", params={"offset": 1, "limit": 1}).json()
        assert [p["id"] for p in page] == ids[1:2]

    def test_invalid_page(self, client):
        response = client.get("/api/products", params={"limit": 0})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_missing_price_persists_nothing(self, client):
        response = client.post("/api/products", json={"name": "Mug"})

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"fields": ["price"]}
        assert client.get("/api/products").json() == []

    @pytest.mark.parametrize("price", ["1e999", "NaN", "-Infinity"])
    def test_non_finite_price_is_rejected(self, client, price):
        response = client.post(
            "/api/products",
            content=f'{{"name": "Huge", "price": {price}}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"fields": ["price"]}
        assert client.get("/api/products").json() == []

    def test_unknown_product(self, client):
        response = client.get("/api/products/missing")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "not_found"
        assert error["details"] == {"entity": "Product", "id": "missing"}

    def test_malformed_body(self, client):
        response = client.post("/api/products", json={"name": "Mug", "price": "cheap"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "validation_error"
        assert error["details"]["errors"]


class TestAuth:
    def test_register_login_and_me(self, client):
        registered = client.post(
            "/api/auth/register", json={"email": "ada@example.com", "password": "s3cret-pass"}
        )
        assert registered.status_code == 201
        body = registered.json()
        assert body["email"] == "ada@example.com"
        assert "password" not in body
        assert "password_hash" not in body

        token = _register_and_login(client)
        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["id"] == body["id"]

    def test_duplicate_registration(self, client):
        credentials = {"email": "ada@example.com", "password": "s3cret-pass"}
        client.post("/api/auth/register", json=credentials)

        response = client.post("/api/auth/register", json=credentials)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "conflict"

    def test_wrong_password(self, client):
        _register_and_login(client)
        response = client.post(
            "/api/auth/login", json={"email": "ada@example.com", "password": "wrong-pass"}
        )
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "invalid_credentials"

    def test_unknown_user_gets_same_error(self, client):
        response = client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "whatever1"}
        )
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid credentials"

    @pytest.mark.parametrize("header", [None, "Basic abc", "Bearer not-a-jwt"])
    def test_me_requires_valid_token(self, client, header):
        headers = {"Authorization": header} if header else {}
        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401


class TestCheckout:
    CART = {"items": [{"product_id": "p-1", "name": "Mug", "price": 9.5, "quantity": 2}]}

    def test_checkout_returns_session_and_order(self, client):
        response = client.post("/api/checkout", json=self.CART)

        assert response.status_code == 200
        body = response.json()
        assert body["sessionId"].startswith("cs_local_")

        order = client.get(f"/api/orders/{body['orderId']}").json()
        assert order["session_id"] == body["sessionId"]
        assert order["status"] == "pending"
        assert order["items"][0]["quantity"] == 2

    def test_checkout_through_http_provider(
        self, client, payment_provider_factory, use_payment_provider
    ):
        use_payment_provider(
            payment_provider_factory(lambda _: httpx.Response(200, json={"id": "cs_test_1"}))
        )

        response = client.post("/api/checkout", json=self.CART)

        assert response.status_code == 200
        assert response.json()["sessionId"] == "cs_test_1"

    def test_provider_failure_is_bad_gateway(
        self, client, payment_provider_factory, use_payment_provider
    ):
        use_payment_provider(
            payment_provider_factory(lambda _: httpx.Response(503, text="unavailable"))
        )

        response = client.post("/api/checkout", json=self.CART)

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "upstream_error"

    @pytest.mark.parametrize("price", ["1e999", "NaN"])
    def test_non_finite_item_price_is_rejected(self, client, price):
        response = client.post(
            "/api/checkout",
            content=f'{{"items": [{{"name": "Mug", "price": {price}}}]}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"fields": ["items[0].price"]}

    def test_empty_cart(self, client):
        response = client.post("/api/checkout", json={"items": []})
        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"fields": ["items"]}

    def test_unknown_order(self, client):
        assert client.get("/api/orders/missing").status_code == 404

    def test_local_provider_is_default_when_payments_disabled(self, client):
        deps = client.app.state.app_dependencies
        assert isinstance(deps.payment_provider, LocalPaymentProvider)


class TestProjects:
    def test_create_and_append_tasks(self, client):
        created = client.post("/api/projects", json={"name": "Launch", "description": "v1"})
        assert created.status_code == 201
        project_id = created.json()["id"]
        assert created.json()["tasks"] == []

        first = client.post(
            f"/api/projects/{project_id}/tasks",
            json={"name": "Plan", "deadline": "2030-01-01"},
        )
        assert first.status_code == 201
        client.post(
            f"/api/projects/{project_id}/tasks",
            json={"name": "Ship", "deadline": "2030-02-01"},
        )

        project = client.get(f"/api/projects/{project_id}").json()
        assert [t["name"] for t in project["tasks"]] == ["Plan", "Ship"]
        assert project["tasks"][0]["deadline"] == "2030-01-01"

        listed = client.get("/api/projects").json()
        assert [p["id"] for p in listed] == [project_id]
        assert len(listed[0]["tasks"]) == 2

    def test_missing_description(self, client):
        response = client.post("/api/projects", json={"name": "Launch"})
        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"fields": ["description"]}

    def test_task_for_unknown_project(self, client):
        response = client.post(
            "/api/projects/missing/tasks", json={"name": "Plan", "deadline": "2030-01-01"}
        )
        assert response.status_code == 404
        assert response.json()["error"]["details"]["entity"] == "Project"

    def test_task_without_deadline(self, client):
        project_id = client.post(
            "/api/projects", json={"name": "Launch", "description": "v1"}
        ).json()["id"]

        response = client.post(f"/api/projects/{project_id}/tasks", json={"name": "Plan"})

        assert response.status_code == 422
        assert client.get(f"/api/projects/{project_id}").json()["tasks"] == []

    def test_task_with_unparseable_deadline(self, client):
        project_id = client.post(
            "/api/projects", json={"name": "Launch", "description": "v1"}
        ).json()["id"]

        response = client.post(
            f"/api/projects/{project_id}/tasks", json={"name": "Plan", "deadline": "soon"}
        )
        assert response.status_code == 422
