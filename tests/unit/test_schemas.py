from __future__ import annotations

import pytest
from pydantic import ValidationError

from yearofprayer.schemas import KEY_TYPES, ConsumerRecord, PrayerPayload, PrayerStats

pytestmark = pytest.mark.unit


def test_key_types_are_consumer_and_client() -> None:
    assert KEY_TYPES == {"consumer", "client"}


@pytest.mark.parametrize("prayer_id", ["01-11", "02-29", "12-31"])
def test_prayer_payload_accepts_dd_dd(prayer_id: str) -> None:
    assert PrayerPayload(id=prayer_id).id == prayer_id


@pytest.mark.parametrize("prayer_id", ["", "2103-2", "03-243", "01_11"])
def test_prayer_payload_rejects_other_shapes(prayer_id: str) -> None:
    with pytest.raises(ValidationError):
        PrayerPayload(id=prayer_id)


def test_consumer_record_keeps_extra_attributes() -> None:
    record = ConsumerRecord.model_validate(
        {"client_id": "c-1", "api_key": "k-1", "device_model": "iOS"}
    )

    assert record.model_dump() == {"client_id": "c-1", "api_key": "k-1", "device_model": "iOS"}


def test_prayer_stats_last_prayer_is_optional() -> None:
    stats = PrayerStats(prayer_request_id="01-11", total_prayers=0, your_prayers=0)

    assert stats.your_last_prayer_on is None
