"""Uniform wrapper around Paystack API responses.

``Response`` is built from a transport response, from another ``Response``
(copied, never nested), or from a plain value. It classifies the HTTP outcome
and exposes the payload the same way whether it is a record, a list or a
scalar.

Outcome classes:
    - 2xx: ``success`` is True.
    - 401, 429, 5xx: raised during construction (``AuthenticationError``,
      ``RateLimitError``, ``ServerError``); no ``Response`` is returned.
    - any other status: returned with ``success`` False and an
      ``error_message`` for the caller to branch on.

Example:
    response = Response(raw)
    if response.success:
        print(response.data.authorization_url)
        for transaction in client.transactions.list():
            print(transaction.reference)
    else:
        print(response.error_message)
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any

from paystack_sdk._http import DEFAULT_RETRY_AFTER_S, GENERIC_ERROR_MESSAGE
from paystack_sdk._keys import has_key, lookup
from paystack_sdk.errors import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
)
from paystack_sdk.transport import TransportResponse

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator

log = logging.getLogger(__name__)

_NOT_FOUND_PHRASES = ("not found", "does not exist")
UNKNOWN_RESOURCE = "unknown"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _wrap(value: Any) -> Any:
    """Wrap records and sequences in a fresh ``Response``; pass scalars through."""
    if isinstance(value, Response):
        return value
    if isinstance(value, Mapping) or _is_sequence(value):
        return Response(value)
    return value


def _retry_after(headers: Mapping[str, str] | None) -> int:
    if not headers:
        return DEFAULT_RETRY_AFTER_S
    raw: Any = None
    for name, value in headers.items():
        if isinstance(name, str) and name.lower() == "retry-after":
            raw = value
            break
    try:
        seconds = int(float(str(raw).strip()))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_RETRY_AFTER_S
    return seconds if seconds >= 0 else DEFAULT_RETRY_AFTER_S


def _not_found_resource(message: str | None, code: Any) -> str | None:
    """Best-effort resource type for "not found" failures, else None."""
    text = (message or "").lower()
    code_str = code if isinstance(code, str) else ""
    if not (
        any(phrase in text for phrase in _NOT_FOUND_PHRASES)
        or code_str.endswith("_not_found")
    ):
        return None
    head = code_str.split("_", 1)[0] if code_str else ""
    return head or UNKNOWN_RESOURCE


class Response:
    """Navigable view over a Paystack response body or any JSON-like value.

    Record keys are readable as attributes, except those named like a method
    or property of this class (``count``, ``keys``, ``data``, ``success``...);
    read those with ``response["count"]`` or ``response.get("count")``.
    """

    __slots__ = (
        "_api_message",
        "_body",
        "_error_message",
        "_raw_data",
        "_resource_type",
        "_status_code",
        "_success",
    )

    def __init__(self, response: Any) -> None:
        """Classify *response* and capture its payload.

        Raises:
            AuthenticationError: On HTTP 401.
            RateLimitError: On HTTP 429.
            ServerError: On HTTP 5xx.
        """
        self._status_code: int | None = None
        self._body: Any = None
        self._api_message: str | None = None
        self._error_message: str | None = None
        self._resource_type: str | None = None

        if isinstance(response, Response):
            self._success: bool = response._success
            self._status_code = response._status_code
            self._body = response._body
            self._api_message = response._api_message
            self._error_message = response._error_message
            self._resource_type = response._resource_type
            self._raw_data: Any = response._raw_data
        elif isinstance(response, TransportResponse):
            self._from_transport(response)
        else:
            self._success = True
            self._raw_data = response

    def _from_transport(self, response: TransportResponse) -> None:
        status = response.status_code
        body = response.body
        self._status_code = status
        self._body = body

        if isinstance(body, Mapping):
            message = body.get("message")
            self._api_message = str(message) if message else None
            data = body.get("data")
            self._raw_data = body if data is None else data
        else:
            self._raw_data = body

        if 200 <= status <= 299:
            self._success = True
            return

        if status == 401:
            log.warning("Paystack rejected credentials (401)")
            if self._api_message:
                raise AuthenticationError(self._api_message)
            raise AuthenticationError()
        if status == 429:
            retry_after = _retry_after(response.headers)
            log.warning("Paystack rate limit hit; retry after %ss", retry_after)
            raise RateLimitError(retry_after)
        if 500 <= status <= 599:
            log.warning("Paystack server error %s: %s", status, self._api_message)
            raise ServerError(status, self._api_message)

        self._success = False
        self._error_message = self._api_message or GENERIC_ERROR_MESSAGE
        if 400 <= status <= 499:
            code = body.get("code") if isinstance(body, Mapping) else None
            self._resource_type = _not_found_resource(self._api_message, code)
        log.debug("Paystack request failed (%s): %s", status, self._error_message)

    # --- Outcome ---

    @property
    def success(self) -> bool:
        return self._success

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def api_message(self) -> str | None:
        return self._api_message

    @property
    def status_code(self) -> int | None:
        """HTTP status, or None when wrapping plain data."""
        return self._status_code

    @property
    def original_response(self) -> Any:
        """The untouched response body, including fields outside ``data``."""
        return self._body

    @property
    def raw_data(self) -> Any:
        """The unwrapped payload this response navigates."""
        return self._raw_data

    @property
    def data(self) -> Response:
        """Return self so ``response.data.field`` and ``response.field`` agree."""
        return self

    @property
    def not_found(self) -> bool:
        return self._resource_type is not None

    @property
    def resource_type(self) -> str | None:
        """Heuristic resource type of a "not found" failure.

        Derived from the leading segment of the body's ``code`` (for example
        ``"transaction"`` from ``"transaction_not_found"``); ``"unknown"`` when
        it cannot be derived, None when the failure is not a "not found".
        """
        return self._resource_type

    def raise_for_error(self) -> Response:
        """Raise for a recoverable failure; return self on success.

        Raises:
            ResourceNotFoundError: When the failure looks like a missing resource.
            APIError: For any other failure.
        """
        if self._success:
            return self
        message = self._error_message or GENERIC_ERROR_MESSAGE
        if self._resource_type is not None:
            raise ResourceNotFoundError(
                self._resource_type, message, status_code=self._status_code
            )
        raise APIError(message, status_code=self._status_code)

    # --- Navigation ---

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not real attributes.
        if name.startswith("_"):
            raise AttributeError(name)
        raw = self._raw_data
        if isinstance(raw, Mapping) and has_key(raw, name):
            return _wrap(lookup(raw, name))
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def get(self, name: Hashable, default: Any = None) -> Any:
        """Explicit field accessor for keys that are not valid identifiers."""
        raw = self._raw_data
        if isinstance(raw, Mapping) and has_key(raw, name):
            return _wrap(lookup(raw, name))
        return default

    def __getitem__(self, key: Any) -> Any:
        raw = self._raw_data
        if isinstance(raw, Mapping):
            try:
                return _wrap(lookup(raw, key))
            except TypeError:
                return None
        if _is_sequence(raw) and isinstance(key, int) and not isinstance(key, bool):
            try:
                return _wrap(raw[key])
            except IndexError:
                return None
        return None

    def __contains__(self, key: Any) -> bool:
        raw = self._raw_data
        if isinstance(raw, Mapping):
            return has_key(raw, key)
        if _is_sequence(raw):
            return key in raw
        return False

    def keys(self) -> list[Any]:
        raw = self._raw_data
        return list(raw.keys()) if isinstance(raw, Mapping) else []

    def __iter__(self) -> Iterator[Any]:
        raw = self._raw_data
        if isinstance(raw, Mapping):
            return ((key, _wrap(value)) for key, value in raw.items())
        if _is_sequence(raw):
            return (_wrap(item) for item in raw)
        return iter(())

    def __len__(self) -> int:
        raw = self._raw_data
        if isinstance(raw, Mapping) or _is_sequence(raw):
            return len(raw)
        return 0

    def __bool__(self) -> bool:
        # Truthiness never depends on payload size.
        return True

    # --- Sequence helpers (None unless the payload is a list) ---

    def first(self) -> Any:
        raw = self._raw_data
        if not _is_sequence(raw) or not raw:
            return None
        return _wrap(raw[0])

    def last(self) -> Any:
        raw = self._raw_data
        if not _is_sequence(raw) or not raw:
            return None
        return _wrap(raw[-1])

    def size(self) -> int | None:
        raw = self._raw_data
        return len(raw) if _is_sequence(raw) else None

    length = size
    count = size

    def empty(self) -> bool | None:
        raw = self._raw_data
        return len(raw) == 0 if _is_sequence(raw) else None

    def __repr__(self) -> str:
        state = "ok" if self._success else f"error={self._error_message!r}"
        return (
            f"Response({state}, status_code={self._status_code}, "
            f"data={self._raw_data!r})"
        )
