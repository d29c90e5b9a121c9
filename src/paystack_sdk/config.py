"""Configuration: frozen Config with secret key auto-resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

from paystack_sdk._http import BASE_URL
from paystack_sdk.errors import ConfigurationError

SECRET_KEY_ENV_VAR = "PAYSTACK_SECRET_KEY"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for a Paystack client.

    The secret key is auto-resolved from ``PAYSTACK_SECRET_KEY`` (a ``.env``
    file is honored) when not passed explicitly.

    Example:
        config = Config(secret_key="sk_test_xxx", timeout_s=10.0)
    """

    #: Auto-resolved from ``PAYSTACK_SECRET_KEY`` when *None*.
    secret_key: str | None = None
    base_url: str = BASE_URL
    #: Applied to connect, read, write and pool timeouts alike.
    timeout_s: float = 30.0

    def __post_init__(self) -> None:
        """Auto-resolve the secret key and validate configuration."""
        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds every HTTP request in seconds.",
            )

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"base_url must be an http(s) URL, got {self.base_url!r}",
                hint=f"The default is {BASE_URL}.",
            )

        if self.secret_key is None:
            # Load .env before reading the environment.
            load_dotenv()
            object.__setattr__(self, "secret_key", os.environ.get(SECRET_KEY_ENV_VAR))

        key = (self.secret_key or "").strip()
        if not key:
            raise ConfigurationError(
                "Secret key required for the Paystack API",
                hint=f"Set {SECRET_KEY_ENV_VAR} or pass Config(secret_key=...).",
            )
        object.__setattr__(self, "secret_key", key)

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(secret_key={'[REDACTED]' if self.secret_key else None}, "
            f"base_url={self.base_url!r}, timeout_s={self.timeout_s})"
        )

    __repr__ = __str__
