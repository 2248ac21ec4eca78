"""Pytest configuration for openresponses tests."""

from __future__ import annotations

import pytest

from openresponses.core.config import ENV_API_KEY, ENV_BASE_URL, ENV_FALLBACK_API_KEY, ENV_TIMEOUT


@pytest.fixture(autouse=True)
def _clear_client_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient credentials out of settings assertions."""
    for name in (ENV_API_KEY, ENV_FALLBACK_API_KEY, ENV_BASE_URL, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)
