"""
Shared pytest fixtures.

Every test gets a freshly built application, so users and orders
never leak from one test into another.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture
def app_settings() -> Settings:
    return Settings(log_level="WARNING")


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user through the API and return its id."""

    def _register(user_id: str) -> str:
        response = client.post("/api/add_user", json={"user_id": user_id})
        assert response.status_code == 200
        return user_id

    return _register
