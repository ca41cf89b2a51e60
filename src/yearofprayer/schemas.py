"""Pydantic models for the payloads exchanged with the backends."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

KeyType = Literal["consumer", "client"]
"""Whose prayer counts a statistics request is scoped to."""

KEY_TYPES: frozenset[str] = frozenset({"consumer", "client"})

PRAYER_ID_PATTERN = r"^\d{2}-\d{2}$"


class ConsumerData(BaseModel):
    """Registration payload describing a consumer device."""

    model_config = ConfigDict(extra="forbid")

    client_id: str | None = None
    device_model: str = Field(..., min_length=1)
    device_platform: str = Field(..., min_length=1)
    device_version: str = Field(..., min_length=1)
    device_uuid: str = Field(..., min_length=1)
    push_token: str = ""
    push_at: str = Field(..., pattern=r"^\d{2}:\d{2}(:\d{2})?$")
    push_lang: str = Field(..., min_length=2)
    time_zone: str = ""
    receive_push: Union[bool, int] = Field(default=0)


class ConsumerRecord(BaseModel):
    """Consumer as stored by the backend, including the assigned API key.

    Device attributes are kept as extra fields so that whatever the backend
    echoes back reaches the caller unchanged.
    """

    model_config = ConfigDict(extra="allow")

    client_id: str | None = None
    api_key: str = Field(..., min_length=1)


class PrayerPayload(BaseModel):
    """Wrapper the prayer backend expects around a prayer identifier."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., pattern=PRAYER_ID_PATTERN)


class PrayerStats(BaseModel):
    """Prayer counts for one prayer request."""

    model_config = ConfigDict(extra="ignore")

    prayer_request_id: str
    total_prayers: int = Field(..., ge=0)
    your_prayers: int = Field(..., ge=0)
    your_last_prayer_on: str | None = None


__all__ = [
    "ConsumerData",
    "ConsumerRecord",
    "KEY_TYPES",
    "KeyType",
    "PRAYER_ID_PATTERN",
    "PrayerPayload",
    "PrayerStats",
]
