"""Charges API for alternative channels such as Mobile Money."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paystack_sdk._keys import lookup
from paystack_sdk.resources.base import Resource
from paystack_sdk.validations import (
    require_inclusion,
    require_present,
    validate_fields,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from paystack_sdk.response import Response

MOBILE_MONEY_PROVIDERS = ("mtn", "atl", "vod", "mpesa", "orange", "wave")


class Charges(Resource):
    """Initiate and authorize charges on channels other than the checkout page.

    Example:
        response = client.charges.mobile_money(
            {
                "email": "customer@email.com",
                "amount": 10000,
                "currency": "GHS",
                "mobile_money": {"phone": "0551234987", "provider": "mtn"},
            }
        )
        print(response.status)  # e.g. "pay_offline"
    """

    def mobile_money(self, payload: Mapping[str, Any]) -> Response:
        """Start a Mobile Money charge.

        Args:
            payload: ``email``, ``amount`` and ``mobile_money`` (with ``phone``
                and ``provider``) are required; ``currency``, ``reference``,
                ``callback_url`` and ``metadata`` are optional.
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
                "mobile_money": {"type": "raw_hash", "required": True},
            },
        )
        details = lookup(payload, "mobile_money")
        require_present(lookup(details, "phone"), "mobile_money phone")
        require_inclusion(
            lookup(details, "provider"),
            MOBILE_MONEY_PROVIDERS,
            "mobile_money provider",
            allow_none=False,
        )
        return self._handle_response(self._connection.post("/charge", payload))

    def submit_otp(self, payload: Mapping[str, Any]) -> Response:
        """Authorize a pending charge with the OTP sent to the customer."""
        validate_fields(
            payload,
            {
                "otp": {"type": "presence", "required": True},
                "reference": {"type": "reference", "required": True},
            },
        )
        return self._handle_response(
            self._connection.post("/charge/submit_otp", payload)
        )
