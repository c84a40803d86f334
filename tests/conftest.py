"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from flashdeck import database
from flashdeck.config import get_settings
from flashdeck.main import app


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite database, fresh for each test."""
    return f"sqlite:///{tmp_path / 'flashdeck.db'}"


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch, database_url: str) -> Generator[None, None, None]:
    """Point the app at the test database and reset cached settings around the test."""
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    database.dispose_engine()


@pytest.fixture
def client(app_env: None) -> Generator[TestClient, Any, None]:
    """Test client running the real lifespan: pool setup and migrations included."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {"name": "a", "first": "A", "last": "B", "email": "a@b.com"}


@pytest.fixture
def test_user(client: TestClient, user_payload: dict[str, Any]) -> dict[str, Any]:
    """A user created through the API."""
    response = client.post("/users", json=user_payload)
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def test_deck(client: TestClient, test_user: dict[str, Any]) -> dict[str, Any]:
    """A deck created through the API."""
    response = client.post(
        "/decks",
        json={
            "user_id": test_user["id"],
            "from": "en",
            "to": "de",
            "seen_at": "2024-03-01T09:30:00",
        },
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def card_payload(test_user: dict[str, Any], test_deck: dict[str, Any]) -> dict[str, Any]:
    return {
        "user_id": test_user["id"],
        "deck_id": test_deck["id"],
        "from": "house",
        "to": "Haus",
        "example": "Das Haus ist alt.",
        "audio_url": "https://example.com/audio/haus.mp3",
        "seen_at": "2024-03-02T18:00:00",
        "seen_for": 4200,
        "rating": 3,
        "prev_rating": 2,
        "related": [1, 2],
    }
