"""
Unit tests for payment result and detail models.
"""
import pytest
from pydantic import ValidationError

from payment_patterns.strategies import (
    BankTransferReceipt,
    CreditCardDetails,
    CreditCardReceipt,
    PaymentMethod,
    PaymentResult,
    PayPalReceipt,
)


class TestPaymentResult:
    @pytest.mark.unit
    def test_success_requires_transaction_id(self) -> None:
        with pytest.raises(ValidationError, match="requires a transaction_id"):
            PaymentResult(success=True, message="ok", amount=1.0, payment_method="PayPal")

    @pytest.mark.unit
    def test_failure_rejects_transaction_id(self) -> None:
        with pytest.raises(ValidationError, match="must not carry a transaction_id"):
            PaymentResult(
                success=False,
                message="nope",
                transaction_id="PP_x_1",
                amount=1.0,
                payment_method="PayPal",
            )

    @pytest.mark.unit
    def test_failure_rejects_receipt(self) -> None:
        with pytest.raises(ValidationError, match="must not carry a receipt"):
            PaymentResult(
                success=False,
                message="nope",
                amount=1.0,
                payment_method="PayPal",
                receipt=PayPalReceipt(paypal_email="user@example.com"),
            )

    @pytest.mark.unit
    def test_failure_factory(self) -> None:
        result = PaymentResult.failure(12.5, PaymentMethod.CREDIT_CARD, "Payment declined by bank")

        assert result.success is False
        assert result.transaction_id is None
        assert result.payment_method == "Credit Card"

    @pytest.mark.unit
    def test_receipt_is_discriminated_by_kind(self) -> None:
        result = PaymentResult.model_validate(
            {
                "success": True,
                "message": "ok",
                "transaction_id": "BT_7890_1",
                "amount": 1.0,
                "payment_method": "Bank Transfer",
                "receipt": {"kind": "bank_transfer", "account_last_four": "7890"},
            }
        )

        assert isinstance(result.receipt, BankTransferReceipt)
        assert result.receipt.processing_time == "1-3 business days"

    @pytest.mark.unit
    def test_as_dict_flattens_receipt_into_camel_case(self) -> None:
        result = PaymentResult(
            success=True,
            message="Payment processed successfully",
            transaction_id="CC_3456_1",
            amount=99.99,
            payment_method="Credit Card",
            receipt=CreditCardReceipt(card_last_four="3456"),
        )

        assert result.as_dict() == {
            "success": True,
            "message": "Payment processed successfully",
            "transactionId": "CC_3456_1",
            "amount": 99.99,
            "paymentMethod": "Credit Card",
            "cardLastFour": "3456",
        }

    @pytest.mark.unit
    def test_as_dict_failure_has_null_transaction_id(self) -> None:
        data = PaymentResult.failure(1.0, "PayPal", "Invalid PayPal account").as_dict()
        assert data["transactionId"] is None
        assert "paypalEmail" not in data


class TestPaymentDetails:
    @pytest.mark.unit
    def test_secrets_are_hidden_from_repr(self) -> None:
        details = CreditCardDetails(card_number="1234567890123456", expiry_date="12/25", cvv="123")
        text = repr(details)

        assert "1234567890123456" not in text
        assert "card_number" not in text
        assert "cvv" not in text
        assert "12/25" in text

    @pytest.mark.unit
    def test_details_are_immutable(self) -> None:
        details = CreditCardDetails(card_number="1234567890123456", expiry_date="12/25", cvv="123")
        with pytest.raises(ValidationError):
            details.cvv = "999"  # type: ignore[misc]
