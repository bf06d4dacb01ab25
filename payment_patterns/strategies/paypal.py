"""PayPal payment strategy."""

from payment_patterns.strategies.base import PaymentStrategy, register_strategy
from payment_patterns.strategies.models import (
    PaymentMethod,
    PaymentResult,
    PayPalDetails,
    PayPalReceipt,
)
from payment_patterns.strategies.validators import is_valid_email, is_valid_password


@register_strategy
class PayPalPayment(PaymentStrategy[PayPalDetails]):
    """PayPal wallet payments. Accounts whose email mentions "invalid" are rejected."""

    method = PaymentMethod.PAYPAL
    details_model = PayPalDetails
    failure_prefix = "PayPal payment failed"
    delay_setting = "paypal_delay_ms"

    def check_details(self, details: PayPalDetails) -> bool:
        return is_valid_email(details.email) and is_valid_password(details.password)

    def settle(self, amount: float, details: PayPalDetails) -> PaymentResult:
        if "invalid" in details.email.lower():
            return self.decline(amount, "Invalid PayPal account")

        return PaymentResult(
            success=True,
            message="PayPal payment processed successfully",
            transaction_id=f"PP_{details.local_part}_{self.clock.now_ms()}",
            amount=amount,
            payment_method=self.method.value,
            receipt=PayPalReceipt(paypal_email=details.email),
        )
