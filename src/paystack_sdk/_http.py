"""Small HTTP-related constants shared across the SDK.

This module is intentionally tiny to avoid circular imports and drift.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("paystack-sdk")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

BASE_URL = "https://api.paystack.co"
USER_AGENT = f"paystack_sdk/{__version__}"

# Seconds to wait when a 429 carries no usable Retry-After header.
DEFAULT_RETRY_AFTER_S = 30

GENERIC_ERROR_MESSAGE = "Paystack API Error"
