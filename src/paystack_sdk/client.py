"""Client: entry point bundling a connection with the API resources."""

from __future__ import annotations

from functools import cached_property
import logging
from typing import TYPE_CHECKING

from paystack_sdk.config import Config
from paystack_sdk.resources import (
    Banks,
    Charges,
    Customers,
    Transactions,
    TransferRecipients,
    Transfers,
    Verification,
)
from paystack_sdk.transport import HttpxConnection

if TYPE_CHECKING:
    from types import TracebackType

    from paystack_sdk.transport import Connection

log = logging.getLogger(__name__)


class Client:
    """Access point for every Paystack resource.

    Resources are built lazily and share one connection.

    Example:
        with Client(secret_key="sk_test_xxx") as client:
            response = client.transactions.verify("ref_123")
    """

    def __init__(
        self,
        secret_key: str | None = None,
        *,
        config: Config | None = None,
        connection: Connection | None = None,
    ) -> None:
        """Create a client.

        Args:
            secret_key: Paystack secret key; falls back to ``PAYSTACK_SECRET_KEY``.
            config: Full configuration; takes precedence over *secret_key*.
            connection: Pre-built connection; no config is resolved when given.
        """
        self._owns_connection = connection is None
        if connection is None:
            config = config or Config(secret_key=secret_key)
            log.debug("Creating Paystack connection: %s", config)
            connection = HttpxConnection(config)
        self._connection = connection

    @property
    def connection(self) -> Connection:
        return self._connection

    @cached_property
    def transactions(self) -> Transactions:
        return Transactions(self._connection)

    @cached_property
    def customers(self) -> Customers:
        return Customers(self._connection)

    @cached_property
    def transfers(self) -> Transfers:
        return Transfers(self._connection)

    @cached_property
    def transfer_recipients(self) -> TransferRecipients:
        return TransferRecipients(self._connection)

    @cached_property
    def verification(self) -> Verification:
        return Verification(self._connection)

    @cached_property
    def charges(self) -> Charges:
        return Charges(self._connection)

    @cached_property
    def banks(self) -> Banks:
        return Banks(self._connection)

    def close(self) -> None:
        """Close the connection if this client created it."""
        if self._owns_connection:
            close = getattr(self._connection, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
