"""
Shared pytest fixtures for EstoqueHub tests.
"""
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from estoquehub.core.config import Settings


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": "test_secret_key_for_testing_only",
        "CORS_ORIGIN": "*",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        os.environ.pop("ACCESS_TOKEN_EXPIRE_MINUTES", None)
        yield env_vars


@pytest.fixture
def settings(mock_env):
    """Settings built from the test environment (in-memory SQLite, 8h tokens)."""
    return Settings()


@pytest.fixture
def app(settings):
    """A fresh application with its own in-memory database."""
    from estoquehub.main import create_application

    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_user(client):
    """Factory registering a user through the API and returning the response."""
    def _register(name="Ana Silva", email="ana@x.com", password="secret1"):
        return client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
    return _register


@pytest.fixture
def auth_headers(register_user):
    """Factory registering a user and returning its Authorization header."""
    def _headers(**kwargs):
        response = register_user(**kwargs)
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _headers
