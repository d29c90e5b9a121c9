"""Banks API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import require_inclusion

if TYPE_CHECKING:
    from paystack_sdk.response import Response

SUPPORTED_CURRENCIES = ("NGN", "GHS", "ZAR", "KES", "USD")


class Banks(Resource):
    def list(self, **query: Any) -> Response:
        """List supported banks, optionally for one ``currency``."""
        if "currency" in query:
            require_inclusion(query["currency"], SUPPORTED_CURRENCIES, "currency")
        return self._handle_response(self._connection.get("/bank", query))
