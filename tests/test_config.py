"""Tests for settings parsing."""

from __future__ import annotations

from src.fundrazor.config import Environment, Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == Environment.development
    assert settings.DATA_FRESHNESS_WINDOW_DAYS == 30
    assert settings.JWT_ALGORITHM == "HS256"
    assert settings.DATABASE_URL.startswith("postgresql+asyncpg://")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DATA_FRESHNESS_WINDOW_DAYS", "14")

    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == Environment.production
    assert settings.DATA_FRESHNESS_WINDOW_DAYS == 14


def test_cors_origins_wildcard():
    assert Settings(_env_file=None, CORS_ALLOWED_ORIGINS="*").get_cors_origins() == ["*"]


def test_cors_origins_list():
    settings = Settings(
        _env_file=None,
        CORS_ALLOWED_ORIGINS="https://app.fundrazor.org, http://localhost:5173,",
    )

    assert settings.get_cors_origins() == ["https://app.fundrazor.org", "http://localhost:5173"]
