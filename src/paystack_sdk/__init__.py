"""Paystack SDK: a thin, validated client for the Paystack REST API.

Public API:
    - Client: Entry point exposing the API resources
    - Config: Configuration dataclass
    - Response: Uniform wrapper around API responses
    - validate_fields(): Pre-flight payload validation
"""

from __future__ import annotations

import logging

from paystack_sdk._http import __version__
from paystack_sdk.client import Client
from paystack_sdk.config import Config
from paystack_sdk.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    InvalidFormatError,
    InvalidValueError,
    MissingParameterError,
    PaystackError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
    TransportError,
    ValidationError,
)
from paystack_sdk.response import Response
from paystack_sdk.transport import Connection, HttpxConnection, RawResponse
from paystack_sdk.validations import ValidationRule, validate_fields

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("paystack_sdk").addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "AuthenticationError",
    "Client",
    "Config",
    "ConfigurationError",
    "Connection",
    "HttpxConnection",
    "InvalidFormatError",
    "InvalidValueError",
    "MissingParameterError",
    "PaystackError",
    "RateLimitError",
    "RawResponse",
    "ResourceNotFoundError",
    "Response",
    "ServerError",
    "TransportError",
    "ValidationError",
    "ValidationRule",
    "__version__",
    "validate_fields",
]
