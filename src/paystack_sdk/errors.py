"""Exception hierarchy for the Paystack SDK."""

from __future__ import annotations


class PaystackError(Exception):
    """Base exception for all Paystack SDK errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(PaystackError):
    """Configuration validation or resolution failed."""


# --- Pre-flight validation ---


class ValidationError(PaystackError):
    """Input parameters failed validation before any API call."""


class MissingParameterError(ValidationError):
    """A required parameter is missing."""

    def __init__(self, field_name: str, *, hint: str | None = None) -> None:
        super().__init__(f"Missing required parameter: {field_name}", hint=hint)
        self.field_name = field_name


class InvalidFormatError(ValidationError):
    """A parameter does not match its expected format."""

    def __init__(
        self, field_name: str, expected_format: str, *, hint: str | None = None
    ) -> None:
        super().__init__(
            f"Invalid format for {field_name}. Expected format: {expected_format}",
            hint=hint,
        )
        self.field_name = field_name
        self.expected_format = expected_format


class InvalidValueError(ValidationError):
    """A parameter has a well-formed but unacceptable value."""

    def __init__(
        self, field_name: str, reason: str, *, hint: str | None = None
    ) -> None:
        super().__init__(f"Invalid value for {field_name}: {reason}", hint=hint)
        self.field_name = field_name
        self.reason = reason


# --- Post-flight API errors ---


class APIError(PaystackError):
    """The Paystack API (or the path to it) failed.

    Carries the HTTP status code and retry hint when known so callers can
    decide on retries without parsing messages.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
        retry_after_s: float | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
        self.retry_after_s = retry_after_s


class AuthenticationError(APIError):
    """Authentication failed (HTTP 401)."""

    def __init__(
        self,
        message: str = "Invalid API key or authentication failed",
        *,
        hint: str | None = "Check PAYSTACK_SECRET_KEY or pass Config(secret_key=...).",
    ) -> None:
        super().__init__(message, hint=hint, status_code=401)


class RateLimitError(APIError):
    """Rate limit exceeded (HTTP 429)."""

    def __init__(self, retry_after: int) -> None:
        super().__init__(
            f"Rate limit exceeded. Retry after {retry_after} seconds",
            hint="Wait and retry.",
            status_code=429,
            retry_after_s=float(retry_after),
        )
        self.retry_after = retry_after


class ServerError(APIError):
    """The Paystack server returned a 5xx status."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
    ) -> None:
        text = message or "An error occurred on the Paystack server"
        super().__init__(
            f"{text} (Status: {status_code})",
            hint="Paystack internal error; retry later.",
            status_code=status_code,
        )


class ResourceNotFoundError(APIError):
    """A requested resource does not exist."""

    def __init__(
        self, resource_type: str, message: str, *, status_code: int | None = None
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.resource_type = resource_type


class TransportError(APIError):
    """The HTTP request could not be completed (network failure or timeout)."""
