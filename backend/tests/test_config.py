from __future__ import annotations

from core.config import Settings, normalize_database_url


def test_normalize_database_url() -> None:
    assert normalize_database_url("postgres://u:p@db/app") == "postgresql+psycopg://u:p@db/app"
    assert normalize_database_url("postgresql://u:p@db/app") == "postgresql+psycopg://u:p@db/app"
    assert normalize_database_url("postgresql+psycopg://u:p@db/app") == "postgresql+psycopg://u:p@db/app"
    assert normalize_database_url("sqlite:///./waitlist.db") == "sqlite:///./waitlist.db"


def test_settings_parse_cors_and_prefix() -> None:
    settings = Settings(
        DATABASE_URL="sqlite://",
        cors_origins="https://a.example, https://b.example,",
        waitlist_prefix="signups/",
    )
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.waitlist_prefix == "/signups"
