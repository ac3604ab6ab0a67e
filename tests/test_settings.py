"""Tests for environment-backed settings."""

from __future__ import annotations

from config.settings import Settings
from relay.core.prompt import SYSTEM_INSTRUCTION


def test_defaults(monkeypatch):
    for name in ("GEMINI_MODEL", "MODEL_TEMPERATURE", "SYSTEM_INSTRUCTION", "PORT", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.temperature == 0.9
    assert settings.system_instruction == SYSTEM_INSTRUCTION
    assert settings.port == 3000
    assert settings.request_timeout is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("MODEL_TEMPERATURE", "0.2")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("GOOGLE_API_KEY", "")

    settings = Settings()

    assert settings.temperature == 0.2
    assert settings.port == 8080
    assert settings.request_timeout == 12.5
    assert settings.google_api_key is None


def test_development_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert Settings().is_development is False
    monkeypatch.setenv("APP_ENV", "Local")
    assert Settings().is_development is True
