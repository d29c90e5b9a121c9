"""Transfers API: send money to transfer recipients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import (
    require_all_present,
    require_hash,
    require_present,
    validate_fields,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response


class Transfers(Resource):
    """Initiate, finalize and track transfers."""

    def create(self, params: Mapping[str, Any]) -> Response:
        """Initiate a transfer; ``source``, ``amount``, ``recipient`` are required."""
        require_hash(params, "Transfer params")
        require_all_present(
            params, ("source", "amount", "recipient"), operation_name="Create Transfer"
        )
        validate_fields(
            params,
            {
                "amount": {"type": "positive_integer", "required": True},
                "currency": {"type": "currency"},
                "reference": {"type": "reference"},
            },
        )
        return self._handle_response(self._connection.post("/transfer", params))

    def list(self, **query: Any) -> Response:
        return self._handle_response(self._connection.get("/transfer", query))

    def fetch(self, id_or_code: int | str) -> Response:
        require_present(id_or_code, "transfer id")
        return self._handle_response(self._connection.get(f"/transfer/{id_or_code}"))

    def finalize(self, transfer_code: str, otp: str) -> Response:
        """Complete a transfer that requires OTP confirmation."""
        require_present(transfer_code, "transfer_code")
        require_present(otp, "otp")
        return self._handle_response(
            self._connection.post(
                "/transfer/finalize_transfer",
                {"transfer_code": transfer_code, "otp": otp},
            )
        )

    def verify(self, reference: str) -> Response:
        require_present(reference, "reference")
        return self._handle_response(
            self._connection.get(f"/transfer/verify/{reference}")
        )
