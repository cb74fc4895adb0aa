"""
Unit tests for estoquehub.core.config
"""
import os
from unittest.mock import patch

from estoquehub.core.config import Settings


def test_defaults_give_eight_hour_tokens(mock_env):
    settings = Settings()
    assert settings.access_token_expire_minutes == 480
    assert settings.jwt_algorithm == "HS256"
    assert settings.cors_origins == ["*"]


def test_postgres_scheme_is_rewritten(mock_env):
    with patch.dict(os.environ, {"DATABASE_URL": "postgres://u:p@db:5432/stock"}):
        settings = Settings()
    assert settings.database_url == "postgresql://u:p@db:5432/stock"


def test_cors_origins_are_split(mock_env):
    with patch.dict(os.environ, {"CORS_ORIGIN": "https://a.app, https://b.app"}):
        settings = Settings()
    assert settings.cors_origins == ["https://a.app", "https://b.app"]


def test_port_from_env(mock_env):
    with patch.dict(os.environ, {"PORT": "8080"}):
        assert Settings().port == 8080
