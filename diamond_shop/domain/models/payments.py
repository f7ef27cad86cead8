"""Payment gateway models.

PaymentRequest describes an outbound payment; PaymentCallback is the parsed
form of the gateway's redirect/IPN query string. OperationResult wraps the
outcome of a payment operation so callers can branch without exceptions.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import PaymentMethod, TransactionStatus

T = TypeVar("T")


class PaymentRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: int
    amount: Decimal = Field(gt=0)
    description: str = ""
    full_name: str = ""
    created_at: datetime = Field(default_factory=datetime.now)


class PaymentCallback(BaseModel):
    """Gateway response after the customer completes (or abandons) payment.

    response_code "00" is the gateway's success code.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    payment_method: PaymentMethod = PaymentMethod.VNPAY
    order_description: str = ""
    order_id: str
    transaction_id: str
    token: str = ""
    response_code: str


class TransactionRecord(BaseModel):
    """Domain view of a persisted transaction."""

    model_config = ConfigDict(frozen=True)

    transaction_id: int
    account_id: int
    order_id: Optional[int] = None
    amount: Decimal
    payment_method: PaymentMethod
    status: TransactionStatus
    gateway_reference: Optional[str] = None


class OperationResult(BaseModel, Generic[T]):
    """Outcome of a service operation: a payload, or an error message."""

    is_error: bool = False
    message: str = ""
    payload: Optional[T] = None

    @classmethod
    def ok(cls, payload: T, message: str = "") -> OperationResult[T]:
        return cls(is_error=False, message=message, payload=payload)

    @classmethod
    def fail(cls, message: str) -> OperationResult[T]:
        return cls(is_error=True, message=message)
