"""Payment gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from diamond_shop.domain.models.payments import (
    OperationResult,
    PaymentCallback,
    PaymentRequest,
    TransactionRecord,
)


class PaymentGateway(ABC):
    """Outbound payment URLs, inbound callbacks, and wallet payments.

    create_payment_url and execute_payment talk to the gateway; the other two
    operations record the outcome and report failures through OperationResult
    rather than raising.
    """

    @abstractmethod
    async def create_payment_url(self, client_ip: str, request: PaymentRequest) -> str:
        """Build the signed URL the customer is redirected to."""

    @abstractmethod
    async def execute_payment(self, query: Mapping[str, str]) -> PaymentCallback:
        """Verify and parse the gateway's callback query string."""

    @abstractmethod
    async def deposit_payment(
        self, callback: PaymentCallback
    ) -> OperationResult[TransactionRecord]:
        """Credit a successful gateway payment to the account wallet."""

    @abstractmethod
    async def pay_order_with_wallet_balance(
        self, order_id: int, account_id: int
    ) -> OperationResult[bool]:
        """Settle an order from the account's wallet balance."""
