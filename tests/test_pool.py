"""Tests for connection pool behaviour under saturation."""

from collections.abc import Generator

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from flashdeck import database
from flashdeck.main import app


@pytest.fixture
def small_pool_client(
    app_env: None, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """Client whose pool holds a single connection and waits briefly for it."""
    monkeypatch.setenv("DB_POOL_SIZE", "1")
    monkeypatch.setenv("DB_MAX_OVERFLOW", "0")
    monkeypatch.setenv("DB_POOL_TIMEOUT", "0.2")
    with TestClient(app) as test_client:
        yield test_client


class TestPoolExhaustion:
    """A saturated pool fails requests after the bounded wait, without crashing."""

    def test_request_fails_with_pool_error_when_saturated(
        self, small_pool_client: TestClient
    ) -> None:
        held = database.get_engine().connect()
        try:
            response = small_pool_client.get("/users")
        finally:
            held.close()

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text.startswith("No database connection available")

    def test_server_recovers_after_connection_released(
        self, small_pool_client: TestClient
    ) -> None:
        held = database.get_engine().connect()
        try:
            small_pool_client.get("/users")
        finally:
            held.close()

        response = small_pool_client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_connection_returned_after_each_request(
        self, small_pool_client: TestClient
    ) -> None:
        """With one pooled connection, sequential requests only work if each releases it."""
        for i in range(5):
            response = small_pool_client.post(
                "/users",
                json={"name": f"n{i}", "first": "F", "last": "L", "email": f"{i}@x.org"},
            )
            assert response.status_code == status.HTTP_200_OK

        missing = small_pool_client.get("/users/999")
        assert missing.status_code == status.HTTP_404_NOT_FOUND

        assert len(small_pool_client.get("/users").json()) == 5
