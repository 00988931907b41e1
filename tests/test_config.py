"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.PORT == 8000
    assert settings.JPEG_QUALITY == 90
    assert settings.cors_origins == ["*"]


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setenv("RELOAD", "true")
    monkeypatch.setenv("JPEG_QUALITY", "75")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.PORT == 9100
    assert settings.RELOAD is True
    assert settings.JPEG_QUALITY == 75
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
