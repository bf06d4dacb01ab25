"""Credit card payment strategy."""

from payment_patterns.strategies.base import PaymentStrategy, register_strategy
from payment_patterns.strategies.models import (
    CreditCardDetails,
    CreditCardReceipt,
    PaymentMethod,
    PaymentResult,
)
from payment_patterns.strategies.validators import (
    is_valid_card_number,
    is_valid_cvv,
    is_valid_expiry_date,
)


@register_strategy
class CreditCardPayment(PaymentStrategy[CreditCardDetails]):
    """
    Card payments.

    Declined when the card number ends in 0; every other valid card is
    charged.
    """

    method = PaymentMethod.CREDIT_CARD
    details_model = CreditCardDetails
    failure_prefix = "Payment processing failed"
    delay_setting = "credit_card_delay_ms"

    def check_details(self, details: CreditCardDetails) -> bool:
        return (
            is_valid_card_number(details.card_number)
            and is_valid_expiry_date(details.expiry_date)
            and is_valid_cvv(details.cvv)
        )

    def settle(self, amount: float, details: CreditCardDetails) -> PaymentResult:
        card_number = details.clean_card_number
        if card_number.endswith("0"):
            return self.decline(amount, "Payment declined by bank")

        last_four = card_number[-4:]
        return PaymentResult(
            success=True,
            message="Payment processed successfully",
            transaction_id=f"CC_{last_four}_{self.clock.now_ms()}",
            amount=amount,
            payment_method=self.method.value,
            receipt=CreditCardReceipt(card_last_four=last_four),
        )
