"""Paystack API resources."""

from paystack_sdk.resources.banks import Banks
from paystack_sdk.resources.base import Resource
from paystack_sdk.resources.charges import Charges
from paystack_sdk.resources.customers import Customers
from paystack_sdk.resources.transactions import Transactions
from paystack_sdk.resources.transfer_recipients import TransferRecipients
from paystack_sdk.resources.transfers import Transfers
from paystack_sdk.resources.verification import Verification

__all__ = [
    "Banks",
    "Charges",
    "Customers",
    "Resource",
    "TransferRecipients",
    "Transactions",
    "Transfers",
    "Verification",
]
