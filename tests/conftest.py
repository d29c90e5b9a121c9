"""Pytest configuration and fixtures.

Provides environment isolation, a recording connection double, and automatic
API test skipping. Fixtures marked autouse apply to every test.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from paystack_sdk.transport import RawResponse

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeConnection:
    """Connection test double.

    Records every call and answers with ``response`` (a successful empty
    envelope by default). Use to test resources without HTTP.
    """

    response: RawResponse = field(
        default_factory=lambda: RawResponse(
            status_code=200, body={"status": True, "message": "OK", "data": {}}
        )
    )
    calls: list[tuple[str, str, Any]] = field(default_factory=list)

    def get(self, path: str, params: Any = None) -> RawResponse:
        self.calls.append(("GET", path, params))
        return self.response

    def post(self, path: str, payload: Any = None) -> RawResponse:
        self.calls.append(("POST", path, payload))
        return self.response

    def put(self, path: str, payload: Any = None) -> RawResponse:
        self.calls.append(("PUT", path, payload))
        return self.response

    def delete(self, path: str) -> RawResponse:
        self.calls.append(("DELETE", path, None))
        return self.response

    @property
    def last_call(self) -> tuple[str, str, Any]:
        assert self.calls, "no request was made"
        return self.calls[-1]


def make_response(
    status_code: int = 200,
    *,
    data: Any = None,
    message: str | None = "OK",
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> RawResponse:
    """Build a RawResponse with Paystack's ``{status, message, data}`` body."""
    body: dict[str, Any] = {"status": 200 <= status_code <= 299}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return RawResponse(status_code=status_code, body=body, headers=headers or {})


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "paystack_sdk.config.load_dotenv",
            lambda *_args, **_kwargs: False,
            raising=False,
        )


@pytest.fixture(autouse=True)
def isolate_paystack_env(request, monkeypatch):
    """Clear PAYSTACK_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("PAYSTACK_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)


@pytest.fixture
def paystack_secret_key():
    """Return PAYSTACK_SECRET_KEY or skip the test if unavailable."""
    key = os.getenv("PAYSTACK_SECRET_KEY")
    if not key:
        pytest.skip("PAYSTACK_SECRET_KEY not set")
    return key
