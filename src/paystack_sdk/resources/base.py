"""Shared base for API resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paystack_sdk.response import Response

if TYPE_CHECKING:
    from paystack_sdk.transport import Connection, TransportResponse


class Resource:
    """Holds the connection and wraps every raw response in a ``Response``."""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._last_response: Response | None = None

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def success(self) -> bool:
        """Whether the last call made through this resource succeeded."""
        return self._last_response is not None and self._last_response.success

    def _handle_response(self, raw: TransportResponse) -> Response:
        response = Response(raw)
        self._last_response = response
        return response
