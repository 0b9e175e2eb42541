from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


DEFAULT_LIST_KEY = "locations"
DEFAULT_USER_AGENT = "locations-feed/0.1"

# Environment variable names read by `load_config_from_env`
ENV_ENDPOINT = "LOCATIONS_ENDPOINT"
ENV_LIST_KEY = "LOCATIONS_LIST_KEY"
ENV_TIMEOUT = "LOCATIONS_TIMEOUT"
ENV_NAME_KEY = "LOCATIONS_NAME_KEY"
ENV_DESCRIPTION_KEY = "LOCATIONS_DESCRIPTION_KEY"
ENV_LOCATION_KEY = "LOCATIONS_LOCATION_KEY"


class ConfigError(RuntimeError):
    """Missing or invalid configuration."""


class FieldKeys(BaseModel):
    """Wire keys of the three required per-element fields."""

    model_config = {"frozen": True}

    name: str = "name"
    description: str = "description"
    location: str = "location"


class FeedConfig(BaseModel):
    """
    Endpoint and wire-format settings for the locations feed.

    Passed explicitly to the transport and presenter; there is no module-level
    configuration holder.
    """

    model_config = {"frozen": True}

    endpoint: str = Field(..., description="Absolute http(s) URL of the GET endpoint")
    list_key: str = Field(default=DEFAULT_LIST_KEY, min_length=1)
    field_keys: FieldKeys = Field(default_factory=FieldKeys)
    timeout_seconds: float = Field(default=15.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("endpoint")
    @classmethod
    def _absolute_http_url(cls, v: str) -> str:
        v = v.strip()
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError("endpoint must be an absolute http(s) URL")
        if len(v.split("://", 1)[1].split("/", 1)[0]) == 0:
            raise ValueError("endpoint is missing a host")
        return v


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


def _require(v: Optional[str], what: str) -> str:
    if not v:
        raise ConfigError(f"Missing required configuration: {what}")
    return v


def load_config_from_env() -> FeedConfig:
    """Build a `FeedConfig` from `LOCATIONS_*` environment variables."""
    endpoint = _require(_getenv(ENV_ENDPOINT), ENV_ENDPOINT)

    timeout_raw = _getenv(ENV_TIMEOUT, "15")
    try:
        timeout = float(timeout_raw)  # type: ignore[arg-type]
    except ValueError as exc:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from exc

    keys = FieldKeys(
        name=_getenv(ENV_NAME_KEY, "name"),  # type: ignore[arg-type]
        description=_getenv(ENV_DESCRIPTION_KEY, "description"),  # type: ignore[arg-type]
        location=_getenv(ENV_LOCATION_KEY, "location"),  # type: ignore[arg-type]
    )
    try:
        return FeedConfig(
            endpoint=endpoint,
            list_key=_getenv(ENV_LIST_KEY, DEFAULT_LIST_KEY),  # type: ignore[arg-type]
            field_keys=keys,
            timeout_seconds=timeout,
        )
    except ValidationError as ve:
        raise ConfigError(f"Invalid configuration: {ve}") from ve


__all__ = [
    "ConfigError",
    "FeedConfig",
    "FieldKeys",
    "load_config_from_env",
]
