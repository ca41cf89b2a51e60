"""HTTP transport shared by the backend clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

import httpx
import structlog

from .exceptions import TransportError

logger = structlog.get_logger(__name__)


@dataclass(slots=True, frozen=True)
class TransportResponse:
    """Status code and decoded JSON body of a completed request."""

    status_code: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport(Protocol):
    """Minimal request surface the backend clients rely on."""

    def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a ``GET`` relative to the configured base URL."""

    def post(
        self, path: str, body: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a ``POST`` with a JSON body."""

    def put(
        self, path: str, body: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a ``PUT`` with a JSON body."""

    def set_base_url(self, url: str) -> None:
        """Point subsequent requests at ``url``."""


@dataclass(slots=True)
class HttpxTransport:
    """:class:`HttpTransport` backed by a pooled :class:`httpx.Client`.

    4xx responses are handed back to the caller so backend clients can map
    them to ``False``, with ``data`` set to ``None`` when the error page is not
    JSON. 5xx responses, connection failures, timeouts and undecodable 2xx
    bodies raise :class:`TransportError`.
    """

    base_url: str = ""
    timeout_seconds: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)
    client: httpx.Client | None = None
    log: Any = field(default_factory=lambda: logger)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = httpx.Client(
                timeout=self.timeout_seconds,
                headers={"Accept": "application/json", **dict(self.headers)},
            )
        self.set_base_url(self.base_url)

    def set_base_url(self, url: str) -> None:
        self.base_url = url.rstrip("/")

    def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        return self._request("GET", path, params=dict(params or {}))

    def post(
        self, path: str, body: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        return self._request("POST", path, json=dict(body or {}))

    def put(
        self, path: str, body: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        return self._request("PUT", path, json=dict(body or {}))

    def close(self) -> None:
        if self.client is not None:
            self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise TransportError("base URL is not configured")
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> TransportResponse:
        url = self._url(path)
        if self.client is None:
            raise TransportError("HTTP client is not initialised")
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            self.log.warning(
                "transport.request.failed",
                method=method,
                url=url,
                error=str(exc),
            )
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 500:
            self.log.warning(
                "transport.request.server_error",
                method=method,
                url=url,
                status=response.status_code,
            )
            raise TransportError(
                f"{method} {url} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        self.log.debug(
            "transport.request.completed",
            method=method,
            url=url,
            status=response.status_code,
        )
        return TransportResponse(
            status_code=response.status_code,
            data=self._decode(response, method=method, url=url),
        )

    @staticmethod
    def _decode(response: httpx.Response, *, method: str, url: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            if not response.is_success:
                return None
            raise TransportError(
                f"{method} {url} returned invalid JSON",
                status_code=response.status_code,
            ) from exc


__all__ = ["HttpTransport", "HttpxTransport", "TransportResponse"]
