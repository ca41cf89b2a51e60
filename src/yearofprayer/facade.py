"""Validating facade in front of the consumer and prayer backends.

Every operation runs in two stages. Local guard clauses reject empty or
forbidden input without touching the network; only then is the payload built
and, where the operation has one, the backend's ``validate`` consulted before
the actual call. Backend and transport failures propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import structlog

from .backends.base import ConsumerBackend, PrayerBackend
from .exceptions import BackendError, InvalidInputError, ensure_present
from .schemas import KEY_TYPES

logger = structlog.get_logger(__name__)

API_KEY_REQUIRED = "API key is required"
INVALID_CONSUMER_DATA = "the consumer data is invalid"
EMPTY_UPDATE = "update data must not be empty"
API_KEY_NOT_UPDATABLE = "api_key may not be updated"
KEY_TYPE_REQUIRED = "key type is required"
INVALID_PRAYER_ID = "prayer id is invalid"


@dataclass(slots=True, frozen=True)
class ApiFacade:
    """Single entry point for client applications."""

    consumers: ConsumerBackend
    prayers: PrayerBackend
    log: Any = field(default_factory=lambda: logger, compare=False)

    def register_consumer(self, client_id: str, consumer_data: Mapping[str, Any]) -> str:
        """Register a consumer and return the API key the backend assigned."""

        if not self.consumers.validate(consumer_data):
            raise InvalidInputError(INVALID_CONSUMER_DATA)

        record = self.consumers.register(client_id, consumer_data)
        api_key = record.get("api_key") if record else None
        if not api_key:
            raise BackendError("consumer registration returned no api_key")
        self.log.info("facade.consumer.registered", client_id=client_id)
        return api_key

    def update_consumer(self, api_key: str, partial_data: Mapping[str, Any]) -> bool:
        """Forward a partial update; ``api_key`` itself can never be changed."""

        ensure_present(api_key, reason=API_KEY_REQUIRED)
        ensure_present(partial_data, reason=EMPTY_UPDATE)
        if "api_key" in partial_data:
            raise InvalidInputError(API_KEY_NOT_UPDATABLE)

        return self.consumers.update(api_key, partial_data)

    def praying(self, api_key: str, prayer_id: str) -> bool:
        """Record a prayer by the consumer for ``prayer_id``."""

        ensure_present(api_key, reason=API_KEY_REQUIRED)

        payload = self._validated_prayer(prayer_id)
        return self.prayers.praying(api_key, payload)

    def prayer_stats(self, api_key: str, key_type: str, prayer_id: str) -> Mapping[str, Any]:
        """Return the backend's statistics record for ``prayer_id`` unmodified."""

        ensure_present(api_key, reason=API_KEY_REQUIRED)
        ensure_present(key_type, reason=KEY_TYPE_REQUIRED)
        if key_type not in KEY_TYPES:
            raise InvalidInputError(
                f"key type must be one of {', '.join(sorted(KEY_TYPES))}"
            )

        payload = self._validated_prayer(prayer_id)
        return self.prayers.prayer_stats(api_key, key_type, payload)

    def _validated_prayer(self, prayer_id: str) -> dict[str, str]:
        payload = {"id": prayer_id}
        if not self.prayers.validate(payload):
            self.log.info("facade.prayer.rejected", prayer_id=prayer_id)
            raise InvalidInputError(INVALID_PRAYER_ID)
        return payload


__all__ = ["ApiFacade"]
