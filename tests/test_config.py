"""Tests for client settings loading and base URL normalization."""

from __future__ import annotations

import pytest

from openresponses.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ClientSettings,
    ConfigError,
    load_settings,
    normalize_base_url,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("https://api.openai.com", "https://api.openai.com/v1"),
        ("https://api.openai.com/", "https://api.openai.com/v1"),
        ("https://api.openai.com/v1", "https://api.openai.com/v1"),
        ("https://api.openai.com/v1/", "https://api.openai.com/v1"),
        ("http://localhost:8080/proxy", "http://localhost:8080/proxy/v1"),
    ],
)
def test_normalize_base_url(raw: str, expected: str) -> None:
    assert normalize_base_url(raw) == expected


def test_load_settings_uses_defaults() -> None:
    settings = load_settings({"OPENRESPONSES_API_KEY": "sk-1"})

    assert settings.api_key == "sk-1"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.normalized_base_url == "https://api.openai.com/v1"


def test_load_settings_falls_back_to_openai_key() -> None:
    settings = load_settings({"OPENAI_API_KEY": "sk-openai"})

    assert settings.api_key == "sk-openai"


def test_primary_key_wins_over_fallback() -> None:
    settings = load_settings({"OPENRESPONSES_API_KEY": "sk-1", "OPENAI_API_KEY": "sk-2"})

    assert settings.api_key == "sk-1"


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENRESPONSES_API_KEY", "sk-process")
    monkeypatch.setenv("OPENRESPONSES_TIMEOUT", "12.5")

    settings = load_settings()

    assert settings.api_key == "sk-process"
    assert settings.timeout == 12.5


def test_overrides_win_over_environment() -> None:
    settings = load_settings(
        {"OPENRESPONSES_API_KEY": "sk-env", "OPENRESPONSES_BASE_URL": "http://env.test"},
        base_url="http://override.test",
        timeout=None,
    )

    assert settings.base_url == "http://override.test"
    assert settings.timeout == DEFAULT_TIMEOUT_SECONDS


def test_missing_api_key_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="no API key configured"):
        load_settings({})


def test_non_numeric_timeout_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="OPENRESPONSES_TIMEOUT"):
        load_settings({"OPENRESPONSES_API_KEY": "sk-1", "OPENRESPONSES_TIMEOUT": "soon"})


def test_non_positive_timeout_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="invalid client settings"):
        load_settings({"OPENRESPONSES_API_KEY": "sk-1"}, timeout=0)


def test_settings_reject_unknown_fields() -> None:
    with pytest.raises(ValueError):
        ClientSettings(api_key="sk-1", organization="org")  # type: ignore[call-arg]
