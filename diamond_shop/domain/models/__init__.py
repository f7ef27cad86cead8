"""Domain models: request/response payloads and enumerations.

Import from this package rather than individual modules.
"""

from .accounts import (
    AccountRequest,
    AccountResponse,
    AccountTokenRequest,
    RegisterRequest,
    TokenPair,
)
from .enums import OrderStatus, PaymentMethod, Role, TransactionStatus
from .payments import OperationResult, PaymentCallback, PaymentRequest, TransactionRecord

__all__ = [
    # Enums
    "Role",
    "OrderStatus",
    "TransactionStatus",
    "PaymentMethod",
    # Accounts
    "AccountRequest",
    "AccountTokenRequest",
    "RegisterRequest",
    "TokenPair",
    "AccountResponse",
    # Payments
    "PaymentRequest",
    "PaymentCallback",
    "TransactionRecord",
    "OperationResult",
]
