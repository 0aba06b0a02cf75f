"""Tests for the cheese and user HTTP routes.

Every test gets its own application and in-memory service through the
``client`` fixture in conftest.py.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from cheese_wizard.core.app_factory import create_app
from cheese_wizard.core.config import AppSettings, Settings
from cheese_wizard.services.cheese_service import CheeseWizardService


def _create_user(client: TestClient, **body) -> str:
    resp = client.post("/v1/users", json=body)
    assert resp.status_code == 201
    return resp.json()["id"]


class TestCheeseRoutes:
    def test_create_cheese_returns_201(self, client: TestClient) -> None:
        resp = client.post("/v1/cheeses", json={"name": "Chedder"})

        assert resp.status_code == 201
        assert resp.json() == {"name": "Chedder", "ratings": []}

    def test_create_duplicate_cheese_returns_409(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "Chedder"})

        resp = client.post("/v1/cheeses", json={"name": "Chedder"})

        assert resp.status_code == 409
        error = resp.json()["error"]
        assert error["code"] == "duplicate_cheese_name"
        assert "request_id" in error
        assert len(client.get("/v1/cheeses").json()) == 1

    def test_create_cheese_requires_name(self, client: TestClient) -> None:
        resp = client.post("/v1/cheeses", json={})

        assert resp.status_code == 422

    def test_list_cheeses_sorted_by_name(self, client: TestClient) -> None:
        for name in ["Chedder", "Mozzerella", "Colby Jack"]:
            client.post("/v1/cheeses", json={"name": name})

        resp = client.get("/v1/cheeses")

        assert resp.status_code == 200
        assert [c["name"] for c in resp.json()] == ["Chedder", "Colby Jack", "Mozzerella"]

    def test_get_cheese(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "Colby Jack"})

        resp = client.get("/v1/cheeses/Colby Jack")

        assert resp.status_code == 200
        assert resp.json()["name"] == "Colby Jack"

    def test_get_cheese_with_slash_in_name(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "Blue/Stilton"})

        resp = client.get("/v1/cheeses/Blue/Stilton")

        assert resp.status_code == 200
        assert resp.json()["name"] == "Blue/Stilton"

    def test_get_unknown_cheese_returns_404(self, client: TestClient) -> None:
        resp = client.get("/v1/cheeses/Gouda")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "cheese_not_found"


class TestUserRoutes:
    def test_create_user(self, client: TestClient) -> None:
        resp = client.post("/v1/users", json={"name": "Jeffery Hugo", "age": 18})

        assert resp.status_code == 201
        data = resp.json()
        assert uuid.UUID(data["id"])
        assert data["name"] == "Jeffery Hugo"
        assert data["age"] == 18
        assert data["ratings"] == []

    def test_create_user_defaults(self, client: TestClient) -> None:
        resp = client.post("/v1/users", json={})

        assert resp.status_code == 201
        assert resp.json()["name"] == ""
        assert resp.json()["age"] == 0

    def test_get_unknown_user_returns_404(self, client: TestClient) -> None:
        resp = client.get(f"/v1/users/{uuid.uuid4()}")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "user_not_found"

    def test_malformed_user_id_returns_422(self, client: TestClient) -> None:
        resp = client.get("/v1/users/not-a-uuid")

        assert resp.status_code == 422


class TestRatingRoutes:
    def test_rating_is_visible_on_user_and_cheese(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "FooCheeseId"})
        user_id = _create_user(client)

        resp = client.post(
            f"/v1/users/{user_id}/ratings",
            json={"rating": 5, "cheese": "FooCheeseId"},
        )

        assert resp.status_code == 201
        assert resp.json()["ratings"] == [{"cheese": "FooCheeseId", "rating": 5}]

        cheese = client.get("/v1/cheeses/FooCheeseId").json()
        assert cheese["ratings"] == [{"user_id": user_id, "rating": 5}]

        user = client.get(f"/v1/users/{user_id}").json()
        assert user["ratings"] == [{"cheese": "FooCheeseId", "rating": 5}]

    def test_second_rating_returns_409_and_keeps_first(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "Brie"})
        user_id = _create_user(client)
        client.post(f"/v1/users/{user_id}/ratings", json={"rating": 5, "cheese": "Brie"})

        resp = client.post(f"/v1/users/{user_id}/ratings", json={"rating": 9, "cheese": "Brie"})

        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "duplicate_rating"
        cheese = client.get("/v1/cheeses/Brie").json()
        assert cheese["ratings"] == [{"user_id": user_id, "rating": 5}]

    @pytest.mark.parametrize(
        "rating,code",
        [
            (0, "below_minimum_rating"),
            (11, "exceeds_maximum_rating"),
        ],
    )
    def test_out_of_bounds_rating_returns_400(
        self, client: TestClient, rating: int, code: str
    ) -> None:
        client.post("/v1/cheeses", json={"name": "Brie"})
        user_id = _create_user(client)

        resp = client.post(
            f"/v1/users/{user_id}/ratings", json={"rating": rating, "cheese": "Brie"}
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == code
        assert client.get(f"/v1/users/{user_id}").json()["ratings"] == []

    def test_rating_unknown_cheese_returns_404(self, client: TestClient) -> None:
        user_id = _create_user(client)

        resp = client.post(f"/v1/users/{user_id}/ratings", json={"rating": 5, "cheese": "Gouda"})

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "cheese_not_found"
        assert client.get("/v1/cheeses").json() == []

    def test_rating_as_unknown_user_returns_404(self, client: TestClient) -> None:
        client.post("/v1/cheeses", json={"name": "Brie"})

        resp = client.post(
            f"/v1/users/{uuid.uuid4()}/ratings", json={"rating": 5, "cheese": "Brie"}
        )

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "user_not_found"

    def test_non_integer_rating_returns_422(self, client: TestClient) -> None:
        user_id = _create_user(client)

        resp = client.post(
            f"/v1/users/{user_id}/ratings", json={"rating": "great", "cheese": "Brie"}
        )

        assert resp.status_code == 422


class TestAppFactory:
    def test_seed_cheeses_from_settings(self) -> None:
        cfg = Settings(app=AppSettings(seed_cheeses="Mozzerella, Chedder"))
        client = TestClient(create_app(cfg))

        resp = client.get("/v1/cheeses")

        assert [c["name"] for c in resp.json()] == ["Chedder", "Mozzerella"]

    def test_custom_api_prefix(self) -> None:
        cfg = Settings(app=AppSettings(api_prefix="/v2"))
        client = TestClient(create_app(cfg, service=CheeseWizardService()))

        assert client.get("/v2/cheeses").status_code == 200
        assert client.get("/v1/cheeses").status_code == 404

    def test_api_placeholder_returns_empty_ok(self, client: TestClient) -> None:
        resp = client.get("/api")

        assert resp.status_code == 200
        assert resp.text == ""

    def test_openapi_lists_tags(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()

        assert {"Cheeses", "Users", "Health"} <= {tag["name"] for tag in schema["tags"]}
