"""Bank transfer payment strategy."""

from payment_patterns.strategies.base import PaymentStrategy, register_strategy
from payment_patterns.strategies.models import (
    BankTransferDetails,
    BankTransferReceipt,
    PaymentMethod,
    PaymentResult,
)
from payment_patterns.strategies.validators import (
    is_valid_account_holder_name,
    is_valid_account_number,
    is_valid_routing_number,
)

SETTLEMENT_WINDOW = "1-3 business days"


@register_strategy
class BankTransferPayment(PaymentStrategy[BankTransferDetails]):
    """
    ACH-style bank transfers.

    Slowest of the three methods. Accounts ending in 999 have insufficient
    funds; everything else is initiated and settles within SETTLEMENT_WINDOW.
    """

    method = PaymentMethod.BANK_TRANSFER
    details_model = BankTransferDetails
    failure_prefix = "Bank transfer failed"
    delay_setting = "bank_transfer_delay_ms"

    def check_details(self, details: BankTransferDetails) -> bool:
        return (
            is_valid_account_number(details.account_number)
            and is_valid_routing_number(details.routing_number)
            and is_valid_account_holder_name(details.account_holder_name)
        )

    def settle(self, amount: float, details: BankTransferDetails) -> PaymentResult:
        account_number = details.account_number
        if account_number.endswith("999"):
            return self.decline(amount, "Insufficient funds")

        last_four = account_number[-4:]
        return PaymentResult(
            success=True,
            message="Bank transfer initiated successfully",
            transaction_id=f"BT_{last_four}_{self.clock.now_ms()}",
            amount=amount,
            payment_method=self.method.value,
            receipt=BankTransferReceipt(
                account_last_four=last_four,
                processing_time=SETTLEMENT_WINDOW,
            ),
        )
