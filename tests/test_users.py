"""Tests for users API endpoints."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from httpx import Response


class TestCreateUser:
    """Test suite for POST /users endpoint."""

    def test_create_user_success(self, client: TestClient, user_payload: dict[str, Any]) -> None:
        """Creating a user returns the stored record with a generated id."""
        response = client.post("/users", json=user_payload)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["id"] > 0
        assert {k: data[k] for k in user_payload} == user_payload

    def test_create_user_assigns_distinct_ids(self, client: TestClient) -> None:
        """Every create gets an id no earlier create received."""
        ids = []
        for i in range(5):
            response = client.post(
                "/users",
                json={"name": f"u{i}", "first": "F", "last": "L", "email": f"u{i}@x.org"},
            )
            assert response.status_code == status.HTTP_200_OK
            ids.append(response.json()["id"])

        assert len(set(ids)) == 5

    def test_create_user_logs_id_not_email(
        self,
        client: TestClient,
        user_payload: dict[str, Any],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.INFO, logger="flashdeck.infrastructure.identity")

        user_id = client.post("/users", json=user_payload).json()["id"]

        assert f"Created user {user_id}" in caplog.text
        assert user_payload["email"] not in caplog.text

    def test_concurrent_creates_get_distinct_ids(self, client: TestClient) -> None:
        """Parallel creates each get their own id and every row is stored."""

        def create(i: int) -> Response:
            return client.post(
                "/users",
                json={"name": f"c{i}", "first": "F", "last": "L", "email": f"c{i}@x.org"},
            )

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(create, range(40)))

        assert {r.status_code for r in results} == {status.HTTP_200_OK}
        ids = [r.json()["id"] for r in results]
        assert len(set(ids)) == 40
        assert sorted(u["id"] for u in client.get("/users").json()) == sorted(ids)

    def test_create_user_missing_field(self, client: TestClient) -> None:
        """A body without email is rejected before touching storage."""
        response = client.post("/users", json={"name": "a", "first": "A", "last": "B"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.headers["content-type"].startswith("text/plain")
        assert "email" in response.text
        assert client.get("/users").json() == []

    def test_create_user_wrong_type(self, client: TestClient) -> None:
        """Non-string fields are a bad request."""
        response = client.post(
            "/users", json={"name": ["a"], "first": "A", "last": "B", "email": "a@b.com"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.text

    def test_create_user_malformed_json(self, client: TestClient) -> None:
        """A body that is not JSON is a bad request."""
        response = client.post(
            "/users", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestListUsers:
    """Test suite for GET /users endpoint."""

    def test_list_users_empty(self, client: TestClient) -> None:
        response = client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_users_includes_created_user(
        self, client: TestClient, test_user: dict[str, Any]
    ) -> None:
        """A created user shows up in the listing with identical fields."""
        response = client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert test_user in response.json()

    def test_list_users_is_stable_without_writes(
        self, client: TestClient, test_user: dict[str, Any]
    ) -> None:
        """Repeated reads return the same set of rows."""
        client.post("/users", json={"name": "b", "first": "C", "last": "D", "email": "b@d.com"})

        first = client.get("/users").json()
        second = client.get("/users").json()

        def as_set(rows: list[dict[str, Any]]) -> set[tuple[Any, ...]]:
            return {tuple(sorted(row.items())) for row in rows}

        assert as_set(first) == as_set(second)
        assert len(first) == 2


class TestGetUser:
    """Test suite for GET /users/:id endpoint."""

    def test_get_user_success(self, client: TestClient, test_user: dict[str, Any]) -> None:
        """Lookup by id returns only that user."""
        client.post("/users", json={"name": "b", "first": "C", "last": "D", "email": "b@d.com"})

        response = client.get(f"/users/{test_user['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == test_user

    def test_get_user_not_found(self, client: TestClient) -> None:
        response = client.get("/users/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "User with id 99999 not found"

    def test_get_user_negative_id(self, client: TestClient) -> None:
        response = client.get("/users/-1")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_get_user_non_integer_id(self, client: TestClient) -> None:
        response = client.get("/users/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
