"""
Unit tests for the payment processor (strategy context).
"""
from typing import Any
from unittest.mock import patch

import pytest

from payment_patterns.core.exceptions import ConfigurationError, NoPaymentStrategyError
from payment_patterns.strategies import (
    INVALID_DETAILS_MESSAGE,
    BankTransferPayment,
    CreditCardPayment,
    PaymentProcessor,
    PayPalPayment,
)


class TestPaymentProcessor:
    """Test suite for PaymentProcessor."""

    @pytest.mark.unit
    def test_no_strategy_raises_configuration_error(self, credit_card_details: dict[str, Any]) -> None:
        processor = PaymentProcessor()

        assert processor.get_current_strategy() is None
        with pytest.raises(NoPaymentStrategyError, match="No payment strategy set"):
            processor.process_payment(10.0, credit_card_details)

    @pytest.mark.unit
    def test_no_strategy_error_is_a_configuration_error(self) -> None:
        error = NoPaymentStrategyError()
        assert isinstance(error, ConfigurationError)
        assert error.to_dict()["error"]["code"] == "no_payment_strategy"

    @pytest.mark.unit
    def test_initial_strategy_from_constructor(
        self, fake_clock: Any, credit_card_details: dict[str, Any]
    ) -> None:
        processor = PaymentProcessor(CreditCardPayment(clock=fake_clock))

        assert processor.get_current_strategy() == "CreditCardPayment"
        assert processor.process_payment(99.99, credit_card_details).success is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "strategy_class, bad_details",
        [
            (CreditCardPayment, {"cardNumber": "1234", "expiryDate": "12/25", "cvv": "123"}),
            (PayPalPayment, {"email": "user@example.com", "password": "123"}),
            (BankTransferPayment, {"accountNumber": "12", "routingNumber": "123456789", "accountHolderName": "Jo"}),
        ],
    )
    def test_invalid_details_fail_fast(
        self, fake_clock: Any, strategy_class: type, bad_details: dict[str, str]
    ) -> None:
        strategy = strategy_class(clock=fake_clock)
        processor = PaymentProcessor(strategy)

        with patch.object(strategy, "process_payment", wraps=strategy.process_payment) as spy:
            result = processor.process_payment(50.0, bad_details)

        assert strategy.validate_payment_details(bad_details) is False
        assert result.success is False
        assert result.transaction_id is None
        assert result.message == INVALID_DETAILS_MESSAGE
        assert result.payment_method == processor.get_current_strategy() == strategy.name
        assert result.amount == 50.0
        spy.assert_not_called()
        assert fake_clock.waits == []
        assert fake_clock.now_calls == 0

    @pytest.mark.unit
    def test_valid_details_return_strategy_result_unchanged(
        self, fake_clock: Any, bank_details: dict[str, Any]
    ) -> None:
        strategy = BankTransferPayment(clock=fake_clock)
        processor = PaymentProcessor(strategy)

        with patch.object(strategy, "process_payment", wraps=strategy.process_payment) as spy:
            result = processor.process_payment(299.99, bank_details)

        spy.assert_called_once_with(299.99, bank_details)
        assert result == strategy.process_payment(299.99, bank_details)
        assert result.receipt.account_last_four == "7890"
        assert result.receipt.processing_time == "1-3 business days"

    @pytest.mark.unit
    def test_paypal_examples(self, fake_clock: Any, paypal_details: dict[str, Any]) -> None:
        processor = PaymentProcessor(PayPalPayment(clock=fake_clock))

        declined = processor.process_payment(
            149.50, {"email": "invalid@example.com", "password": "secret1"}
        )
        accepted = processor.process_payment(149.50, paypal_details)

        assert declined.success is False
        assert declined.message == "Invalid PayPal account"
        assert accepted.success is True
        assert accepted.receipt.paypal_email == "user@example.com"

    @pytest.mark.unit
    def test_switching_strategies_uses_only_the_latest(
        self, clock_factory: Any, paypal_details: dict[str, Any]
    ) -> None:
        card_clock, paypal_clock = clock_factory(), clock_factory()
        card = CreditCardPayment(clock=card_clock)
        paypal = PayPalPayment(clock=paypal_clock)
        processor = PaymentProcessor()

        processor.set_payment_strategy(card)
        processor.set_payment_strategy(paypal)

        with patch.object(card, "validate_payment_details") as card_validate, patch.object(
            card, "process_payment"
        ) as card_process:
            result = processor.process_payment(75.0, paypal_details)

        assert processor.get_current_strategy() == "PayPalPayment"
        assert result.success is True
        assert result.payment_method == "PayPal"
        card_validate.assert_not_called()
        card_process.assert_not_called()
        assert card_clock.waits == []
        assert paypal_clock.waits == [200]

    @pytest.mark.unit
    def test_details_for_previous_strategy_fail_after_switch(
        self, fake_clock: Any, credit_card_details: dict[str, Any]
    ) -> None:
        processor = PaymentProcessor(CreditCardPayment(clock=fake_clock))
        processor.set_payment_strategy(BankTransferPayment(clock=fake_clock))

        result = processor.process_payment(75.0, credit_card_details)

        assert result.success is False
        assert result.message == INVALID_DETAILS_MESSAGE
        assert result.payment_method == "BankTransferPayment"

    @pytest.mark.unit
    def test_invalid_details_report_strategy_class_name(self, fake_clock: Any) -> None:
        processor = PaymentProcessor(CreditCardPayment(clock=fake_clock))

        result = processor.process_payment(
            10.0, {"cardNumber": "1", "expiryDate": "12/25", "cvv": "123"}
        )

        assert result.payment_method == "CreditCardPayment"
        assert result.payment_method == processor.get_current_strategy()

    @pytest.mark.unit
    def test_same_input_same_outcome_different_ids(
        self, fake_clock: Any, credit_card_details: dict[str, Any]
    ) -> None:
        processor = PaymentProcessor(CreditCardPayment(clock=fake_clock))

        first = processor.process_payment(10.0, credit_card_details)
        fake_clock.now += 1
        second = processor.process_payment(10.0, credit_card_details)

        assert first.success is second.success is True
        assert first.transaction_id != second.transaction_id
