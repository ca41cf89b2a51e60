"""Prayer-tracking backend client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote

import structlog
from pydantic import ValidationError

from ..exceptions import BackendError
from ..schemas import PrayerPayload, PrayerStats
from ..transport import HttpTransport
from .base import PrayerBackend, PrayerIdPayload

logger = structlog.get_logger(__name__)


def _prayer_path(payload: PrayerIdPayload, suffix: str = "") -> str:
    return f"/prayers/{quote(str(payload['id']), safe='')}{suffix}"


@dataclass(slots=True)
class HttpPrayerBackend(PrayerBackend):
    """Talk to the prayer service over ``transport``.

    ``validate`` checks the ``DD-DD`` shape first and only asks the backend
    whether the prayer request exists when the shape is right, so identifiers
    such as ``02-30`` are rejected remotely while ``2103-2`` never leaves the
    process.
    """

    transport: HttpTransport
    log: Any = field(default_factory=lambda: logger)

    def validate(self, payload: PrayerIdPayload) -> bool:
        try:
            PrayerPayload.model_validate(dict(payload))
        except ValidationError:
            self.log.info(
                "prayer.validate.schema_rejected",
                prayer_id=payload.get("id"),
            )
            return False

        response = self.transport.get(_prayer_path(payload))
        return response.ok

    def praying(self, api_key: str, payload: PrayerIdPayload) -> bool:
        response = self.transport.post(
            _prayer_path(payload, "/praying"), {"api_key": api_key}
        )
        if not response.ok:
            self.log.info(
                "prayer.praying.rejected",
                prayer_id=payload["id"],
                status=response.status_code,
            )
        return response.ok

    def prayer_stats(
        self, api_key: str, key_type: str, payload: PrayerIdPayload
    ) -> Mapping[str, Any]:
        response = self.transport.get(
            _prayer_path(payload, "/stats"),
            {"api_key": api_key, "key_type": key_type},
        )
        if not response.ok:
            raise BackendError(
                f"prayer stats request failed with status {response.status_code}",
                status_code=response.status_code,
            )
        try:
            stats = PrayerStats.model_validate(response.data)
        except ValidationError as exc:
            raise BackendError(
                "prayer stats response is malformed",
                status_code=response.status_code,
            ) from exc
        return stats.model_dump()
