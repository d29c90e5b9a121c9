"""Verification API: resolve accounts and card BINs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import require_all_present, require_hash, require_present

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response

ACCOUNT_VALIDATION_FIELDS = (
    "account_number",
    "account_name",
    "account_type",
    "bank_code",
    "country_code",
    "document_type",
)


class Verification(Resource):
    def resolve_account(self, account_number: str, bank_code: str) -> Response:
        """Confirm an account number belongs to the right customer."""
        require_present(account_number, "account_number")
        require_present(bank_code, "bank_code")
        return self._handle_response(
            self._connection.get(
                "/bank/resolve",
                {"account_number": account_number, "bank_code": bank_code},
            )
        )

    def resolve_card_bin(self, bin: str) -> Response:
        """Look up card details from the first six digits."""
        require_present(bin, "bin")
        return self._handle_response(self._connection.get(f"/decision/bin/{bin}"))

    def validate_account(self, params: Mapping[str, Any]) -> Response:
        """Validate an account against the owner's identity document.

        ``document_number`` is optional; every field of
        ``ACCOUNT_VALIDATION_FIELDS`` is required.
        """
        require_hash(params, "Validate Account params")
        require_all_present(
            params, ACCOUNT_VALIDATION_FIELDS, operation_name="Validate Account"
        )
        return self._handle_response(self._connection.post("/bank/validate", params))
