"""Composition helpers wiring settings, transports and backend clients."""

from __future__ import annotations

from dataclasses import dataclass

from .backends import HttpConsumerBackend, HttpPrayerBackend
from .config import ServiceSettings, load_settings
from .facade import ApiFacade
from .logging import configure_logging
from .transport import HttpxTransport


@dataclass(slots=True)
class FacadeBundle:
    """A ready facade together with the transports it owns."""

    facade: ApiFacade
    consumer_transport: HttpxTransport
    prayer_transport: HttpxTransport

    def close(self) -> None:
        self.consumer_transport.close()
        self.prayer_transport.close()

    def __enter__(self) -> ApiFacade:
        return self.facade

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def _build_transport(settings: ServiceSettings, base_url: str) -> HttpxTransport:
    transport = HttpxTransport(
        timeout_seconds=settings.timeout_seconds,
        headers={"User-Agent": settings.user_agent},
    )
    transport.set_base_url(base_url)
    return transport


def build_api_facade(settings: ServiceSettings | None = None) -> FacadeBundle:
    """Build an :class:`ApiFacade` talking to the configured backends."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    consumer_transport = _build_transport(settings, settings.consumer_base_url)
    prayer_transport = _build_transport(settings, settings.prayer_base_url)
    facade = ApiFacade(
        consumers=HttpConsumerBackend(consumer_transport),
        prayers=HttpPrayerBackend(prayer_transport),
    )
    return FacadeBundle(
        facade=facade,
        consumer_transport=consumer_transport,
        prayer_transport=prayer_transport,
    )


__all__ = ["FacadeBundle", "build_api_facade"]
