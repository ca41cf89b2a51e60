"""Consumer-registration backend client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote

import structlog
from pydantic import ValidationError

from ..exceptions import BackendError
from ..schemas import ConsumerData, ConsumerRecord
from ..transport import HttpTransport
from .base import ConsumerBackend, ConsumerPayload

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class HttpConsumerBackend(ConsumerBackend):
    """Talk to the consumer service over ``transport``."""

    transport: HttpTransport
    log: Any = field(default_factory=lambda: logger)

    def validate(self, payload: ConsumerPayload) -> bool:
        try:
            ConsumerData.model_validate(dict(payload))
        except ValidationError as exc:
            self.log.info(
                "consumer.validate.schema_rejected",
                errors=exc.error_count(),
            )
            return False

        response = self.transport.post("/consumers/validate", dict(payload))
        if not response.ok or not isinstance(response.data, Mapping):
            return False
        return bool(response.data.get("valid", False))

    def register(self, client_id: str, payload: ConsumerPayload) -> Mapping[str, Any]:
        body = {**dict(payload), "client_id": client_id}
        response = self.transport.post("/consumers", body)
        if not response.ok:
            raise BackendError(
                f"consumer registration failed with status {response.status_code}",
                status_code=response.status_code,
            )
        try:
            record = ConsumerRecord.model_validate(response.data)
        except ValidationError as exc:
            raise BackendError(
                "consumer registration returned a malformed record",
                status_code=response.status_code,
            ) from exc
        self.log.info("consumer.registered", client_id=client_id)
        return record.model_dump()

    def update(self, api_key: str, payload: ConsumerPayload) -> bool:
        response = self.transport.put(f"/consumers/{quote(api_key, safe='')}", dict(payload))
        if not response.ok:
            self.log.info(
                "consumer.update.rejected",
                status=response.status_code,
                fields=sorted(payload),
            )
        return response.ok
