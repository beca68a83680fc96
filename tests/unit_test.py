"""Unit tests that do not require a running API or database."""
from utilbill.config import Settings, settings


def test_settings_load():
    """Settings load with defaults and environment overrides."""
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.APP_NAME == "Utility Billing API"


def test_environment_flag():
    """Environment flags reflect ENVIRONMENT value."""
    assert settings.is_development == (settings.ENVIRONMENT.lower() == "development")
    assert settings.is_production == (settings.ENVIRONMENT.lower() == "production")


def test_postgres_url_uses_asyncpg():
    s = Settings(DATABASE_URL="postgresql://u:p@db:5432/billing")
    assert s.async_database_url == "postgresql+asyncpg://u:p@db:5432/billing"


def test_sqlite_url_unchanged():
    s = Settings(DATABASE_URL="sqlite+aiosqlite:///./utility.db")
    assert s.async_database_url == "sqlite+aiosqlite:///./utility.db"


def test_comma_separated_lists_are_parsed():
    s = Settings(ALLOWED_ORIGINS="http://a.test, http://b.test", ALLOWED_METHODS="GET,POST")
    assert s.ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]
    assert s.ALLOWED_METHODS == ["GET", "POST"]
