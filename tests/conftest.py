from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``YEAROFPRAYER_*`` variables out of the test run."""

    for name in list(os.environ):
        if name.startswith("YEAROFPRAYER_"):
            monkeypatch.delenv(name, raising=False)
