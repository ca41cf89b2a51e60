"""Backend clients for the consumer and prayer services."""

from .base import ConsumerBackend, PrayerBackend
from .consumer import HttpConsumerBackend
from .prayer import HttpPrayerBackend

__all__ = [
    "ConsumerBackend",
    "HttpConsumerBackend",
    "HttpPrayerBackend",
    "PrayerBackend",
]
