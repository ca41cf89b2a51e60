"""Error hierarchy shared by the facade, backend clients and transport."""

from __future__ import annotations

__all__ = [
    "AppError",
    "InvalidInputError",
    "BackendError",
    "TransportError",
    "ensure_present",
]


class AppError(Exception):
    """Base class for application specific errors."""


class InvalidInputError(AppError, ValueError):
    """Raised when caller input is rejected locally or by a backend ``validate``."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class BackendError(AppError):
    """Raised when a backend answers with something the client cannot use."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(BackendError):
    """Raised when a request could not be completed by the HTTP transport."""


def ensure_present(value: object, *, reason: str) -> None:
    """Raise :class:`InvalidInputError` with ``reason`` when ``value`` is empty."""

    if not value:
        raise InvalidInputError(reason)
