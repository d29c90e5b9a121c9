"""Customers API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import (
    require_date_format,
    require_hash,
    require_positive_integer,
    require_present,
    validate_fields,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response

RISK_ACTIONS = ("default", "allow", "deny")


class Customers(Resource):
    """Create, list, fetch, update and manage customers.

    Example:
        response = client.customers.create({"email": "customer@email.com"})
        if response.success:
            print(response.customer_code)
    """

    def create(self, payload: Mapping[str, Any]) -> Response:
        """Create a customer; ``email`` is required."""
        validate_fields(
            payload,
            {
                "email": {"type": "email", "required": True},
                "first_name": {"type": "presence"},
                "last_name": {"type": "presence"},
                "phone": {"type": "presence"},
                "metadata": {"type": "raw_hash"},
            },
        )
        return self._handle_response(self._connection.post("/customer", payload))

    def list(self, per_page: int = 50, page: int = 1, **params: Any) -> Response:
        require_positive_integer(per_page, "per_page")
        require_positive_integer(page, "page")
        require_date_format(params.get("from"), "from")
        require_date_format(params.get("to"), "to")
        query = {"perPage": per_page, "page": page, **params}
        return self._handle_response(self._connection.get("/customer", query))

    def fetch(self, email_or_code: str) -> Response:
        """Fetch a customer by email address or customer code."""
        require_present(email_or_code, "email_or_code")
        return self._handle_response(
            self._connection.get(f"/customer/{email_or_code}")
        )

    def update(self, code: str, payload: Mapping[str, Any]) -> Response:
        require_present(code, "code")
        require_hash(payload, "payload")
        return self._handle_response(self._connection.put(f"/customer/{code}", payload))

    def validate(self, code: str, payload: Mapping[str, Any]) -> Response:
        """Validate a customer's identity against a bank account.

        Args:
            code: Customer code.
            payload: ``country``, ``type``, ``account_number`` and
                ``bank_code`` are required; ``bvn``, ``first_name`` and
                ``last_name`` are optional.
        """
        require_present(code, "code")
        validate_fields(
            payload,
            {
                "country": {"type": "presence", "required": True},
                "type": {"type": "presence", "required": True},
                "account_number": {"type": "presence", "required": True},
                "bank_code": {"type": "presence", "required": True},
            },
        )
        return self._handle_response(
            self._connection.post(f"/customer/{code}/identification", payload)
        )

    def set_risk_action(self, payload: Mapping[str, Any]) -> Response:
        """Whitelist or blacklist a customer (``default``, ``allow``, ``deny``)."""
        validate_fields(
            payload,
            {
                "customer": {"type": "presence", "required": True},
                "risk_action": {
                    "type": "inclusion",
                    "required": True,
                    "allowed_values": RISK_ACTIONS,
                },
            },
        )
        return self._handle_response(
            self._connection.post("/customer/set_risk_action", payload)
        )

    def deactivate_authorization(self, payload: Mapping[str, Any]) -> Response:
        validate_fields(
            payload,
            {"authorization_code": {"type": "presence", "required": True}},
        )
        return self._handle_response(
            self._connection.post("/customer/deactivate_authorization", payload)
        )
