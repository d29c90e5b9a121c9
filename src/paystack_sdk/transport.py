"""HTTP transport: the connection resources use to reach the Paystack API.

Resources only depend on the ``Connection`` protocol, so tests (and callers
with special networking needs) can substitute any object with the same verbs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

from paystack_sdk._http import USER_AGENT
from paystack_sdk.errors import TransportError

if TYPE_CHECKING:
    from types import TracebackType

    from paystack_sdk.config import Config

log = logging.getLogger(__name__)


@runtime_checkable
class TransportResponse(Protocol):
    """Anything exposing a status code, a parsed body and headers."""

    status_code: int
    body: Any
    headers: Mapping[str, str]


@dataclass(frozen=True)
class RawResponse:
    """A completed HTTP exchange, body already decoded."""

    status_code: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Connection(Protocol):
    """Minimal verb interface used by resources."""

    def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a GET request with optional query parameters."""
        ...

    def post(
        self, path: str, payload: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a POST request with a JSON body."""
        ...

    def put(
        self, path: str, payload: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        """Issue a PUT request with a JSON body."""
        ...

    def delete(self, path: str) -> TransportResponse:
        """Issue a DELETE request."""
        ...


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            log.debug("Response declared JSON but did not parse; keeping text")
    return response.text


class HttpxConnection:
    """``Connection`` backed by a synchronous ``httpx.Client``."""

    def __init__(
        self,
        config: Config,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Build a client bound to ``config.base_url`` with bearer auth.

        Args:
            config: Resolved SDK configuration.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        self._client = httpx.Client(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.secret_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(config.timeout_s),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> RawResponse:
        return self._request("GET", path, params=dict(params) if params else None)

    def post(
        self, path: str, payload: Mapping[str, Any] | None = None
    ) -> RawResponse:
        return self._request("POST", path, json=dict(payload or {}))

    def put(
        self, path: str, payload: Mapping[str, Any] | None = None
    ) -> RawResponse:
        return self._request("PUT", path, json=dict(payload or {}))

    def delete(self, path: str) -> RawResponse:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, **kwargs: Any) -> RawResponse:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Paystack {method} {path} timed out",
                hint="Raise Config.timeout_s or retry later.",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Paystack {method} {path} failed: {exc}") from exc

        log.debug("%s %s -> %s", method, path, response.status_code)
        return RawResponse(
            status_code=response.status_code,
            body=_decode_body(response),
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
