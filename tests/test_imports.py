"""Smoke-check imports for the public modules of the package."""

from __future__ import annotations

from importlib import import_module
from types import ModuleType

import pytest

MODULES_AND_SYMBOLS = [
    ("yearofprayer", "ApiFacade"),
    ("yearofprayer", "InvalidInputError"),
    ("yearofprayer", "build_api_facade"),
    ("yearofprayer.backends", "ConsumerBackend"),
    ("yearofprayer.backends", "PrayerBackend"),
    ("yearofprayer.backends", "HttpConsumerBackend"),
    ("yearofprayer.backends", "HttpPrayerBackend"),
    ("yearofprayer.config", "ServiceSettings"),
    ("yearofprayer.container", "FacadeBundle"),
    ("yearofprayer.exceptions", "TransportError"),
    ("yearofprayer.logging", "configure_logging"),
    ("yearofprayer.schemas", "PrayerStats"),
    ("yearofprayer.transport", "HttpxTransport"),
]


@pytest.mark.parametrize(("module_name", "symbol"), MODULES_AND_SYMBOLS)
def test_importable_symbols(module_name: str, symbol: str) -> None:
    """Import modules and verify that public symbols are exposed."""

    module: ModuleType = import_module(module_name)
    assert hasattr(module, symbol), f"{module_name} missing {symbol}"
