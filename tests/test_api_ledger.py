"""
Tests for the ledger API endpoints.

Exercises the full stack through FastAPI's TestClient: routing,
body validation, authorization by user existence, response shapes
and headers, and error mapping.
"""

import json

import pytest
from fastapi.testclient import TestClient

from app.domain.ledger.entities import User
from app.domain.ledger.errors import LedgerDomainError
from app.main import create_app

RUB_USD = {"user_id": "u1", "source": "RUB", "target": "USD", "value": 20, "price": 61}
USD_EUR = {"user_id": "u1", "source": "USD", "target": "EUR", "value": 5, "price": 1.1}

ROUTES = ["/api/add_user", "/api/add_order", "/api/get_orders", "/api/get_userdetail"]


class TestRouting:
    """Tests for exact (method, path) routing."""

    def test_unknown_path_returns_404(self, client) -> None:
        response = client.post("/api/remove_user", json={"user_id": "u1"})
        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.parametrize("path", ROUTES)
    def test_wrong_method_returns_404(self, client, path) -> None:
        """A known path with the wrong method is not found, not a bad request."""
        response = client.get(path)
        assert response.status_code == 404
        assert response.content == b""

    def test_put_on_known_path_returns_404(self, client) -> None:
        response = client.put("/api/add_user", json={"user_id": "u1"})
        assert response.status_code == 404

    def test_paths_match_exactly(self, client) -> None:
        response = client.post("/api/add_user/extra", json={"user_id": "u1"})
        assert response.status_code == 404

    def test_trailing_slash_is_not_redirected(self, client, app) -> None:
        response = client.post(
            "/api/add_user/", json={"user_id": "u1"}, follow_redirects=False
        )
        assert response.status_code == 404
        assert response.content == b""
        assert not app.state.user_store.exists("u1")

    def test_docs_hidden_outside_debug(self, client) -> None:
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404

    def test_security_headers_present(self, client) -> None:
        response = client.post("/api/nowhere")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"


class TestAddUser:
    """Tests for POST /api/add_user."""

    def test_add_user_returns_200_empty(self, client) -> None:
        response = client.post("/api/add_user", json={"user_id": "123123123"})
        assert response.status_code == 200
        assert response.content == b""

    def test_add_user_twice_is_not_an_error(self, client, app) -> None:
        assert client.post("/api/add_user", json={"user_id": "u1"}).status_code == 200
        assert client.post("/api/add_user", json={"user_id": "u1"}).status_code == 200
        assert list(app.state.user_store.list_all()) == ["u1"]

    def test_readding_user_resets_balance(self, client, app, register) -> None:
        register("u1")
        app.state.user_store.update(User(user_id="u1", balances={"USD": 10.0}))
        register("u1")

        response = client.post("/api/get_userdetail", json={"user_id": "u1"})
        assert response.json()["balance"] == []


class TestAddOrder:
    """Tests for POST /api/add_order."""

    def test_add_order_returns_200_empty(self, client, register) -> None:
        register("u1")
        response = client.post("/api/add_order", json=RUB_USD)
        assert response.status_code == 200
        assert response.content == b""

    def test_unregistered_user_returns_403(self, client) -> None:
        response = client.post("/api/add_order", json=RUB_USD)
        assert response.status_code == 403
        assert response.content == b""

    def test_rejected_order_is_not_stored(self, client, app) -> None:
        client.post("/api/add_order", json=RUB_USD)
        assert app.state.order_store.count() == 0

    def test_any_numeric_value_is_accepted(self, client, register) -> None:
        register("u1")
        order = {**RUB_USD, "value": -3, "price": 0}
        assert client.post("/api/add_order", json=order).status_code == 200

    @pytest.mark.parametrize("field", ["user_id", "source", "target", "value", "price"])
    def test_missing_field_returns_400(self, client, register, field) -> None:
        register("u1")
        body = {k: v for k, v in RUB_USD.items() if k != field}
        response = client.post("/api/add_order", json=body)
        assert response.status_code == 400
        assert response.content == b""

    @pytest.mark.parametrize(
        "field, value",
        [("value", "20"), ("price", None), ("source", 643), ("user_id", ["u1"])],
    )
    def test_mistyped_field_returns_400(self, client, register, field, value) -> None:
        register("u1")
        response = client.post("/api/add_order", json={**RUB_USD, field: value})
        assert response.status_code == 400


class TestGetOrders:
    """Tests for POST /api/get_orders."""

    def test_no_orders(self, client, register) -> None:
        register("u1")
        response = client.post("/api/get_orders", json={"user_id": "u1"})
        assert response.status_code == 200
        assert response.json() == {"orders": []}

    def test_orders_in_insertion_order(self, client, register) -> None:
        register("u1")
        register("u2")
        client.post("/api/add_order", json=RUB_USD)
        client.post("/api/add_order", json={**RUB_USD, "user_id": "u2"})
        client.post("/api/add_order", json=USD_EUR)

        response = client.post("/api/get_orders", json={"user_id": "u1"})
        assert response.status_code == 200
        assert response.json() == {
            "orders": [
                {"user_id": "u1", "source": "RUB", "target": "USD", "value": 20, "price": 61},
                {"user_id": "u1", "source": "USD", "target": "EUR", "value": 5, "price": 1.1},
            ]
        }

    def test_body_is_strict_json(self, client, register) -> None:
        """No trailing comma after the last order."""
        register("u1")
        client.post("/api/add_order", json=RUB_USD)
        response = client.post("/api/get_orders", json={"user_id": "u1"})
        assert b", ]" not in response.content
        assert len(json.loads(response.content)["orders"]) == 1

    def test_json_headers(self, client, register) -> None:
        register("u1")
        client.post("/api/add_order", json=RUB_USD)
        response = client.post("/api/get_orders", json={"user_id": "u1"})
        assert response.headers["content-type"] == "application/json"
        assert int(response.headers["content-length"]) == len(response.content)

    def test_unregistered_user_returns_403(self, client) -> None:
        response = client.post("/api/get_orders", json={"user_id": "ghost"})
        assert response.status_code == 403
        assert response.content == b""


class TestGetUserDetail:
    """Tests for POST /api/get_userdetail."""

    def test_new_user_has_empty_balance(self, client, register) -> None:
        register("u1")
        response = client.post("/api/get_userdetail", json={"user_id": "u1"})
        assert response.status_code == 200
        assert response.json() == {"user_id": "u1", "balance": []}

    def test_balance_is_a_list_of_pairs(self, client, app, register) -> None:
        register("u1")
        app.state.user_store.update(
            User(user_id="u1", balances={"RUB": 1000.0, "USD": 16.5})
        )
        response = client.post("/api/get_userdetail", json={"user_id": "u1"})
        assert response.json() == {
            "user_id": "u1",
            "balance": [["RUB", 1000.0], ["USD", 16.5]],
        }

    def test_orders_do_not_change_balance(self, client, register) -> None:
        register("u1")
        client.post("/api/add_order", json=RUB_USD)
        response = client.post("/api/get_userdetail", json={"user_id": "u1"})
        assert response.json()["balance"] == []

    def test_json_headers(self, client, register) -> None:
        register("u1")
        response = client.post("/api/get_userdetail", json={"user_id": "u1"})
        assert response.headers["content-type"] == "application/json"
        assert int(response.headers["content-length"]) == len(response.content)

    def test_unregistered_user_returns_403(self, client) -> None:
        response = client.post("/api/get_userdetail", json={"user_id": "ghost"})
        assert response.status_code == 403


class TestBadRequests:
    """Malformed bodies are rejected with 400 and an empty body on every route."""

    @pytest.mark.parametrize("path", ROUTES)
    @pytest.mark.parametrize(
        "content",
        [b"", b"{not json", b"{}", b'{"user_id": 42}', b"[1, 2]"],
    )
    def test_malformed_body(self, client, register, path, content) -> None:
        register("u1")
        response = client.post(
            path, content=content, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.content == b""

    def test_oversized_body(self, app_settings) -> None:
        small = app_settings.model_copy(update={"max_request_size_bytes": 8})
        client = TestClient(create_app(small))
        response = client.post("/api/add_user", json={"user_id": "u1"})
        assert response.status_code == 400


class TestIsolation:
    """Each application instance owns its own stores."""

    def test_apps_do_not_share_users(self, app_settings) -> None:
        first = TestClient(create_app(app_settings))
        second = TestClient(create_app(app_settings))
        first.post("/api/add_user", json={"user_id": "u1"})

        assert second.post("/api/get_userdetail", json={"user_id": "u1"}).status_code == 403


class TestServerErrors:
    """Unhandled failures map to a 500 with the ErrorResponse body."""

    def test_domain_error_returns_500(self, app) -> None:
        @app.post("/api/explode")
        def explode() -> None:
            raise LedgerDomainError("boom")

        response = TestClient(app).post("/api/explode")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "boom" not in response.text
