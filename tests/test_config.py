"""Tests for configuration module."""

from catalog_admin.config import Settings, settings


def test_settings_import():
    """Test that settings can be imported."""
    assert settings is not None


def test_default_settings(monkeypatch):
    """Test default settings values."""
    for name in ("DATABASE_URL", "LOG_FILE", "RELOAD_ON_CHANGE", "SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)

    defaults = Settings(_env_file=None)

    assert defaults.app_name == "Catalog Admin"
    assert defaults.database_url.startswith("sqlite")
    assert defaults.atomic_renames is True
    assert defaults.reload_on_change is True
    assert defaults.currency_symbol == "₹"
    assert defaults.store_timeout_seconds > 0


def test_env_override(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("APP_NAME", "Test Catalog")
    monkeypatch.setenv("ATOMIC_RENAMES", "false")
    monkeypatch.setenv("APP_ENV", "test")

    overridden = Settings(_env_file=None)

    assert overridden.app_name == "Test Catalog"
    assert overridden.atomic_renames is False
    assert overridden.environment == "test"


def test_test_environment_is_isolated():
    assert settings.database_url == "sqlite://"
    assert settings.reload_on_change is False
