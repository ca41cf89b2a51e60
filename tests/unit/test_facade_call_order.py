"""Facade sequencing checked against recording backend doubles."""

from __future__ import annotations

import pytest

from tests.mocks.backends import RecordingConsumerBackend, RecordingPrayerBackend
from yearofprayer.exceptions import InvalidInputError
from yearofprayer.facade import ApiFacade

pytestmark = pytest.mark.unit


@pytest.fixture
def consumers() -> RecordingConsumerBackend:
    return RecordingConsumerBackend()


@pytest.fixture
def prayers() -> RecordingPrayerBackend:
    return RecordingPrayerBackend()


@pytest.fixture
def facade(consumers: RecordingConsumerBackend, prayers: RecordingPrayerBackend) -> ApiFacade:
    return ApiFacade(consumers=consumers, prayers=prayers)


def test_registration_validates_before_registering(
    facade: ApiFacade, consumers: RecordingConsumerBackend
) -> None:
    data = {"device_model": "Pixel", "push_at": "07:30:00"}

    assert facade.register_consumer("client-1", data) == "generated-api-key"
    assert consumers.calls == [
        ("validate", (data,)),
        ("register", ("client-1", data)),
    ]


def test_update_never_calls_validate(
    facade: ApiFacade, consumers: RecordingConsumerBackend
) -> None:
    facade.update_consumer("key-1", {"receive_push": 1})

    assert consumers.methods == ["update"]


def test_praying_validates_then_delegates_once(
    facade: ApiFacade, prayers: RecordingPrayerBackend
) -> None:
    assert facade.praying("key-1", "01-11") is True
    assert prayers.methods == ["validate", "praying"]


def test_stats_default_record_passes_through(
    facade: ApiFacade, prayers: RecordingPrayerBackend
) -> None:
    stats = facade.prayer_stats("key-1", "client", "12-02")

    assert stats["prayer_request_id"] == "12-02"
    assert prayers.calls[-1] == ("prayer_stats", ("key-1", "client", {"id": "12-02"}))


def test_unknown_prayer_stops_after_validate(
    facade: ApiFacade, prayers: RecordingPrayerBackend
) -> None:
    with pytest.raises(InvalidInputError):
        facade.prayer_stats("key-1", "consumer", "02-30")

    assert prayers.methods == ["validate"]


def test_facade_holds_no_per_call_state(
    facade: ApiFacade, prayers: RecordingPrayerBackend
) -> None:
    facade.praying("key-1", "01-11")
    facade.praying("key-2", "02-29")

    assert prayers.calls[1] == ("praying", ("key-1", {"id": "01-11"}))
    assert prayers.calls[3] == ("praying", ("key-2", {"id": "02-29"}))
