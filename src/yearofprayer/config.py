"""Runtime settings for the backend transports.

Values come from ``YEAROFPRAYER_*`` environment variables; the defaults point
at a local development stack so the facade can be built without any setup.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Pydantic settings container for the consumer and prayer backends."""

    model_config = cast(
        Any,
        SettingsConfigDict(env_prefix="YEAROFPRAYER_", extra="ignore"),
    )

    consumer_base_url: str = Field(
        default="http://localhost:8000/api/v1",
        min_length=1,
        description="Base URL of the consumer-registration service.",
    )
    prayer_base_url: str = Field(
        default="http://localhost:8000/api/v1",
        min_length=1,
        description="Base URL of the prayer-tracking service.",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout applied by the HTTP transport.",
    )
    user_agent: str = Field(
        default="yearofprayer-api/0.1",
        description="User-Agent header sent with every backend request.",
    )
    log_level: str = Field(
        default="INFO",
        description="Level passed to ``configure_logging``.",
    )

    @field_validator("consumer_base_url", "prayer_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.upper()


def load_settings(**overrides: Any) -> ServiceSettings:
    """Load settings from the environment, applying explicit overrides last."""

    return ServiceSettings(**overrides)


__all__ = ["ServiceSettings", "load_settings"]
