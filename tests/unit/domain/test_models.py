"""Tests for diamond_shop/domain/models: enums, payloads, package exports."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from diamond_shop.domain.models import __all__ as domain_all
from diamond_shop.domain.models import (
    AccountResponse,
    OperationResult,
    OrderStatus,
    PaymentCallback,
    PaymentMethod,
    PaymentRequest,
    Role,
    TokenPair,
    TransactionStatus,
)


def test_domain_models_exports_thirteen_names():
    assert len(domain_all) == 13


def test_enums_compare_to_plain_strings():
    assert Role.CUSTOMER == "customer"
    assert OrderStatus.PAID == "paid"
    assert TransactionStatus.SUCCESS == "success"
    assert PaymentMethod.WALLET == "wallet"


def test_account_response_coerces_role():
    response = AccountResponse(
        account_id=1,
        email="abc@gmail.com",
        role="staff",
        tokens=TokenPair(access_token="a", refresh_token="r"),
    )
    assert response.role is Role.STAFF


def test_payment_request_requires_positive_amount():
    with pytest.raises(ValidationError):
        PaymentRequest(order_id=1, amount=Decimal("0"))


def test_payment_callback_defaults_to_vnpay():
    callback = PaymentCallback(
        success=True, order_id="12", transaction_id="14422574", response_code="00"
    )
    assert callback.payment_method is PaymentMethod.VNPAY


def test_operation_result_ok_carries_payload():
    result = OperationResult[bool].ok(True)
    assert result.is_error is False
    assert result.payload is True


def test_operation_result_fail_carries_message():
    result = OperationResult[bool].fail("Insufficient wallet balance")
    assert result.is_error is True
    assert result.message == "Insufficient wallet balance"
    assert result.payload is None
