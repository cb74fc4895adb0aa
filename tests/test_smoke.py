"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package can be imported."""
    from estoquehub.core.config import get_settings
    from estoquehub.main import app

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "database_url")
    assert app.title == "EstoqueHub API"


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
