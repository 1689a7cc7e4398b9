"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from photo_share.config import Settings


def test_defaults_bind_loopback_port_8000(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.playground_url == "http://localhost:8000"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOST", "10.0.0.5")
    monkeypatch.setenv("PORT", "9001")

    settings = Settings()

    assert settings.port == 9001
    assert settings.playground_url == "http://10.0.0.5:9001"


def test_rejects_out_of_range_port() -> None:
    with pytest.raises(ValidationError):
        Settings(port=70000)


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError, match="log_level"):
        Settings(log_level="verbose")


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"
