"""Transfer Recipients API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import require_all_present, require_hash, require_present

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response

RECIPIENT_FIELDS = ("type", "name", "account_number", "bank_code")


class TransferRecipients(Resource):
    """Manage the beneficiaries transfers are sent to."""

    def create(self, params: Mapping[str, Any]) -> Response:
        require_hash(params, "TransferRecipient params")
        require_all_present(
            params, RECIPIENT_FIELDS, operation_name="Create Transfer Recipient"
        )
        return self._handle_response(
            self._connection.post("/transferrecipient", params)
        )

    def list(self, **query: Any) -> Response:
        return self._handle_response(self._connection.get("/transferrecipient", query))

    def fetch(self, recipient_code: str) -> Response:
        require_present(recipient_code, "recipient_code")
        return self._handle_response(
            self._connection.get(f"/transferrecipient/{recipient_code}")
        )

    def update(self, recipient_code: str, params: Mapping[str, Any]) -> Response:
        require_present(recipient_code, "recipient_code")
        require_hash(params, "Update TransferRecipient params")
        return self._handle_response(
            self._connection.put(f"/transferrecipient/{recipient_code}", params)
        )

    def delete(self, recipient_code: str) -> Response:
        require_present(recipient_code, "recipient_code")
        return self._handle_response(
            self._connection.delete(f"/transferrecipient/{recipient_code}")
        )
