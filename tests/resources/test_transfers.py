from __future__ import annotations

from typing import Any

import pytest

from paystack_sdk.errors import (
    InvalidFormatError,
    InvalidValueError,
    MissingParameterError,
)
from paystack_sdk.resources import TransferRecipients, Transfers
from tests.conftest import FakeConnection, make_response

pytestmark = pytest.mark.unit

TRANSFER = {"source": "balance", "amount": 37800, "recipient": "RCP_t0ya41mp35flk40"}
RECIPIENT = {
    "type": "nuban",
    "name": "Tolu Robert",
    "account_number": "01000000010",
    "bank_code": "058",
}


@pytest.fixture
def transfers(connection: FakeConnection) -> Transfers:
    return Transfers(connection)


@pytest.fixture
def recipients(connection: FakeConnection) -> TransferRecipients:
    return TransferRecipients(connection)


# --- Transfers ---


def test_create_transfer(connection: FakeConnection, transfers: Transfers) -> None:
    connection.response = make_response(
        message="Transfer has been queued",
        data={"transfer_code": "TRF_1ptvuv321ahaa7q", "status": "otp"},
    )

    response = transfers.create({**TRANSFER, "reason": "Holiday Flexing"})

    assert connection.last_call[:2] == ("POST", "/transfer")
    assert response.transfer_code == "TRF_1ptvuv321ahaa7q"


@pytest.mark.parametrize(
    ("params", "error", "field_name"),
    [
        ({"amount": 100, "recipient": "RCP_1"}, MissingParameterError, "source"),
        ({**TRANSFER, "amount": 0}, InvalidValueError, "amount"),
        ({**TRANSFER, "currency": "ngn"}, InvalidFormatError, "currency"),
        ({**TRANSFER, "reference": "a b"}, InvalidFormatError, "reference"),
    ],
)
def test_create_transfer_validation(
    connection: FakeConnection,
    transfers: Transfers,
    params: dict[str, Any],
    error: type[Exception],
    field_name: str,
) -> None:
    with pytest.raises(error) as exc:
        transfers.create(params)

    assert exc.value.field_name == field_name  # type: ignore[attr-defined]
    assert connection.calls == []


def test_create_transfer_rejects_non_mapping(transfers: Transfers) -> None:
    with pytest.raises(InvalidFormatError, match="Transfer params"):
        transfers.create(None)  # type: ignore[arg-type]


def test_list_fetch_verify(connection: FakeConnection, transfers: Transfers) -> None:
    transfers.list(perPage=5)
    transfers.fetch("TRF_1")
    transfers.verify("ref_1")

    assert connection.calls == [
        ("GET", "/transfer", {"perPage": 5}),
        ("GET", "/transfer/TRF_1", None),
        ("GET", "/transfer/verify/ref_1", None),
    ]


def test_fetch_requires_identifier(transfers: Transfers) -> None:
    with pytest.raises(MissingParameterError, match="transfer id"):
        transfers.fetch("")


def test_finalize_sends_code_and_otp(
    connection: FakeConnection, transfers: Transfers
) -> None:
    transfers.finalize("TRF_1", "928783")

    assert connection.last_call == (
        "POST",
        "/transfer/finalize_transfer",
        {"transfer_code": "TRF_1", "otp": "928783"},
    )
    with pytest.raises(MissingParameterError, match="otp"):
        transfers.finalize("TRF_1", "")


# --- Transfer recipients ---


def test_create_recipient(
    connection: FakeConnection, recipients: TransferRecipients
) -> None:
    recipients.create(RECIPIENT)

    assert connection.last_call == ("POST", "/transferrecipient", RECIPIENT)


@pytest.mark.parametrize("missing", ["type", "name", "account_number", "bank_code"])
def test_create_recipient_reports_missing_field(
    connection: FakeConnection, recipients: TransferRecipients, missing: str
) -> None:
    params = {k: v for k, v in RECIPIENT.items() if k != missing}

    with pytest.raises(MissingParameterError) as exc:
        recipients.create(params)

    assert exc.value.field_name == missing
    assert connection.calls == []


def test_recipient_crud_paths(
    connection: FakeConnection, recipients: TransferRecipients
) -> None:
    recipients.list(page=2)
    recipients.fetch("RCP_1")
    recipients.update("RCP_1", {"name": "Rick"})
    recipients.delete("RCP_1")

    assert connection.calls == [
        ("GET", "/transferrecipient", {"page": 2}),
        ("GET", "/transferrecipient/RCP_1", None),
        ("PUT", "/transferrecipient/RCP_1", {"name": "Rick"}),
        ("DELETE", "/transferrecipient/RCP_1", None),
    ]


def test_recipient_operations_require_code(recipients: TransferRecipients) -> None:
    with pytest.raises(MissingParameterError, match="recipient_code"):
        recipients.delete("")
    with pytest.raises(InvalidFormatError):
        recipients.update("RCP_1", "Rick")  # type: ignore[arg-type]
