"""
Payment processor - the context of the strategy pattern.

Holds at most one strategy, validates details with it and delegates the
payment. The strategy can be swapped at any time; the next call uses the new
one exclusively.
"""

from typing import Optional

import structlog

from payment_patterns.core.exceptions import NoPaymentStrategyError
from payment_patterns.strategies.base import DetailsInput, PaymentStrategy
from payment_patterns.strategies.models import PaymentResult

logger = structlog.get_logger(__name__)

INVALID_DETAILS_MESSAGE = "Invalid payment details provided"


class PaymentProcessor:
    """Entry point clients use to take payments."""

    def __init__(self, payment_strategy: Optional[PaymentStrategy] = None):
        self._strategy: Optional[PaymentStrategy] = payment_strategy

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        """Set or change the payment strategy at runtime."""
        previous = self.get_current_strategy()
        self._strategy = payment_strategy
        logger.debug(
            "payment_strategy_changed",
            previous=previous,
            current=payment_strategy.name,
        )

    def process_payment(self, amount: float, payment_details: DetailsInput) -> PaymentResult:
        """
        Validate details with the active strategy, then process the payment.

        Invalid details short-circuit: the strategy's processing step (delay,
        transaction id) never runs.

        Raises:
            NoPaymentStrategyError: If no strategy has been set
        """
        strategy = self._strategy
        if strategy is None:
            raise NoPaymentStrategyError()

        if not strategy.validate_payment_details(payment_details):
            logger.info(
                "payment_details_invalid",
                payment_method=strategy.method.value,
                amount=amount,
            )
            return PaymentResult.failure(amount, strategy.name, INVALID_DETAILS_MESSAGE)

        return strategy.process_payment(amount, payment_details)

    def get_current_strategy(self) -> Optional[str]:
        """Class name of the active strategy, or None if none is set."""
        if self._strategy is None:
            return None
        return self._strategy.name
