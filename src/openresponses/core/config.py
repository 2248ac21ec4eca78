"""Client settings and base URL normalization."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_TIMEOUT_SECONDS = 60.0
API_VERSION_SEGMENT = "/v1"

ENV_API_KEY = "OPENRESPONSES_API_KEY"
ENV_FALLBACK_API_KEY = "OPENAI_API_KEY"
ENV_BASE_URL = "OPENRESPONSES_BASE_URL"
ENV_TIMEOUT = "OPENRESPONSES_TIMEOUT"

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class ConfigError(RuntimeError):
    """Raised when client settings are missing or invalid."""


class ClientSettings(BaseModel):
    """Connection settings for a responses client."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    api_key: NonEmptyStr
    base_url: NonEmptyStr = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)

    @property
    def normalized_base_url(self) -> str:
        return normalize_base_url(self.base_url)


def normalize_base_url(base_url: str) -> str:
    """Strip one trailing slash and make sure the URL ends in ``/v1``."""
    normalized = base_url.strip()
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    if not normalized.endswith(API_VERSION_SEGMENT):
        normalized = f"{normalized}{API_VERSION_SEGMENT}"
    return normalized


def load_settings(environ: Mapping[str, str] | None = None, **overrides: Any) -> ClientSettings:
    """Build settings from environment variables; keyword overrides win."""
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    api_key = env.get(ENV_API_KEY) or env.get(ENV_FALLBACK_API_KEY)
    if api_key:
        values["api_key"] = api_key
    base_url = env.get(ENV_BASE_URL)
    if base_url:
        values["base_url"] = base_url
    timeout = env.get(ENV_TIMEOUT)
    if timeout:
        try:
            values["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {timeout!r}") from exc

    values.update({key: value for key, value in overrides.items() if value is not None})
    if "api_key" not in values:
        raise ConfigError(f"no API key configured; set {ENV_API_KEY} or {ENV_FALLBACK_API_KEY}")

    try:
        return ClientSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"invalid client settings: {exc}") from exc
