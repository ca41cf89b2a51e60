"""Capability interfaces the facade depends on.

Each backend is reached through an :class:`~yearofprayer.transport.HttpTransport`
by the concrete clients in this package; the facade only sees these abstract
operations, so tests can substitute recording doubles without any network.
Records cross this boundary as plain mappings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

ConsumerPayload = Mapping[str, Any]
PrayerIdPayload = Mapping[str, str]


class ConsumerBackend(ABC):
    """Consumer-registration service."""

    @abstractmethod
    def validate(self, payload: ConsumerPayload) -> bool:
        """Return whether the backend accepts ``payload`` for registration."""

    @abstractmethod
    def register(self, client_id: str, payload: ConsumerPayload) -> Mapping[str, Any]:
        """Register a consumer and return its record including ``api_key``."""

    @abstractmethod
    def update(self, api_key: str, payload: ConsumerPayload) -> bool:
        """Apply a partial update to the consumer addressed by ``api_key``."""


class PrayerBackend(ABC):
    """Prayer-tracking service."""

    @abstractmethod
    def validate(self, payload: PrayerIdPayload) -> bool:
        """Return whether ``payload['id']`` names a known prayer request."""

    @abstractmethod
    def praying(self, api_key: str, payload: PrayerIdPayload) -> bool:
        """Record that the caller prayed for the given prayer request."""

    @abstractmethod
    def prayer_stats(
        self, api_key: str, key_type: str, payload: PrayerIdPayload
    ) -> Mapping[str, Any]:
        """Return prayer counts for the request, scoped by ``key_type``."""
