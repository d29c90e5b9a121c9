"""Transactions API: initialize, verify, list and charge payments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import (
    require_currency_format,
    require_date_format,
    require_inclusion,
    require_positive_integer,
    require_present,
    validate_fields,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response

TRANSACTION_STATUSES = ("failed", "success", "abandoned")


def _check_filters(params: Mapping[str, Any]) -> None:
    if "status" in params:
        require_inclusion(params["status"], TRANSACTION_STATUSES, "status")
    if "currency" in params:
        require_currency_format(params["currency"], "currency")
    if "amount" in params:
        require_positive_integer(params["amount"], "amount")
    require_date_format(params.get("from"), "from")
    require_date_format(params.get("to"), "to")


class Transactions(Resource):
    """Accept and inspect payments.

    Example:
        response = client.transactions.initiate(
            {"email": "customer@email.com", "amount": 10000, "currency": "GHS"}
        )
        if response.success:
            print(response.data.authorization_url)
        else:
            print(response.error_message)
    """

    def initiate(self, payload: Mapping[str, Any]) -> Response:
        """Initialize a transaction and obtain an authorization URL.

        Args:
            payload: ``email`` and ``amount`` (lowest currency unit) are
                required; ``currency``, ``reference`` and ``callback_url``
                are optional.
        """
        validate_fields(
            payload,
            {
                "email": {"type": "email", "required": True},
                "amount": {"type": "positive_integer", "required": True},
                "currency": {"type": "currency"},
                "reference": {"type": "reference"},
                "callback_url": {"type": "presence"},
                "metadata": {"type": "raw_hash"},
            },
        )
        return self._handle_response(
            self._connection.post("/transaction/initialize", payload)
        )

    def verify(self, reference: str) -> Response:
        """Confirm the status of a transaction by its reference."""
        require_present(reference, "reference")
        return self._handle_response(
            self._connection.get(f"/transaction/verify/{reference}")
        )

    def list(self, per_page: int = 50, page: int = 1, **params: Any) -> Response:
        """List transactions, optionally filtered by status, customer or dates."""
        require_positive_integer(per_page, "per_page")
        require_positive_integer(page, "page")
        _check_filters(params)
        query = {"perPage": per_page, "page": page, **params}
        return self._handle_response(self._connection.get("/transaction", query))

    def fetch(self, transaction_id: int | str) -> Response:
        """Fetch a single transaction by its id."""
        require_present(transaction_id, "transaction_id")
        return self._handle_response(
            self._connection.get(f"/transaction/{transaction_id}")
        )

    def totals(self, **params: Any) -> Response:
        """Total amount received, optionally bounded by ``from``/``to`` dates."""
        require_date_format(params.get("from"), "from")
        require_date_format(params.get("to"), "to")
        return self._handle_response(
            self._connection.get("/transaction/totals", params)
        )

    def export(self, **params: Any) -> Response:
        """Request a CSV export link of transactions matching the filters."""
        _check_filters(params)
        return self._handle_response(
            self._connection.get("/transaction/export", params)
        )

    def charge_authorization(self, payload: Mapping[str, Any]) -> Response:
        """Charge a reusable authorization from an earlier transaction."""
        validate_fields(
            payload,
            {
                "authorization_code": {"type": "presence", "required": True},
                "email": {"type": "email", "required": True},
                "amount": {"type": "positive_integer", "required": True},
                "reference": {"type": "reference"},
                "currency": {"type": "currency"},
            },
        )
        return self._handle_response(
            self._connection.post("/transaction/charge_authorization", payload)
        )

    def partial_debit(self, payload: Mapping[str, Any]) -> Response:
        """Retrieve part of a payment from a customer's authorization."""
        validate_fields(
            payload,
            {
                "authorization_code": {"type": "presence", "required": True},
                "currency": {"type": "currency", "required": True},
                "amount": {"type": "positive_integer", "required": True},
                "email": {"type": "email", "required": True},
                "reference": {"type": "reference"},
                "at_least": {"type": "positive_integer"},
            },
        )
        return self._handle_response(
            self._connection.post("/transaction/partial_debit", payload)
        )

    def timeline(self, id_or_reference: int | str) -> Response:
        """Fetch the event timeline of a transaction."""
        require_present(id_or_reference, "id_or_reference")
        return self._handle_response(
            self._connection.get(f"/transaction/timeline/{id_or_reference}")
        )
