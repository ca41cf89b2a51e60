"""Validating client facade for the Year of Prayer consumer and prayer services."""

from .container import FacadeBundle, build_api_facade
from .exceptions import AppError, BackendError, InvalidInputError, TransportError
from .facade import ApiFacade

__all__ = [
    "ApiFacade",
    "AppError",
    "BackendError",
    "FacadeBundle",
    "InvalidInputError",
    "TransportError",
    "build_api_facade",
]
