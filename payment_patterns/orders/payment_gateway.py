"""
Simulated card/wallet gateway used by the order pipeline.

Outcomes are random: a payment succeeds when ``rng.random()`` falls below the
success rate for its type. Pass a seeded ``random.Random`` (or set
``PAYMENT_ORDER_PAYMENT_SEED``) for reproducible runs.
"""

import random
import string
from enum import Enum
from typing import Dict, Optional

import structlog
from pydantic import BaseModel

from payment_patterns.config import get_settings

logger = structlog.get_logger(__name__)

TRANSACTION_ID_ALPHABET = string.digits + string.ascii_uppercase
TRANSACTION_ID_LENGTH = 9
PAYMENT_FAILED_MESSAGE = "Payment processing failed"


class PaymentType(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    BANK_TRANSFER = "BANK_TRANSFER"


class PaymentMethodInfo(BaseModel):
    type: PaymentType
    details: str = ""


class GatewayResult(BaseModel):
    success: bool
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None


class SimulatedPaymentService:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        success_rates: Optional[Dict[str, float]] = None,
    ):
        settings = get_settings()
        self.rng = rng or random.Random(settings.order_payment_seed)
        self.success_rates = success_rates or settings.get_success_rates()

    def process_payment(self, amount: float, payment_method: PaymentMethodInfo) -> GatewayResult:
        logger.info(
            "gateway_payment_started",
            amount=amount,
            payment_type=payment_method.type.value,
        )
        if self._simulate(payment_method):
            transaction_id = self._generate_transaction_id()
            logger.info("gateway_payment_succeeded", transaction_id=transaction_id)
            return GatewayResult(success=True, transaction_id=transaction_id)

        logger.warning("gateway_payment_failed", payment_type=payment_method.type.value)
        return GatewayResult(success=False, error_message=PAYMENT_FAILED_MESSAGE)

    def _simulate(self, payment_method: PaymentMethodInfo) -> bool:
        rate = self.success_rates.get(payment_method.type.value, 0.0)
        return self.rng.random() < rate

    def _generate_transaction_id(self) -> str:
        suffix = "".join(
            self.rng.choice(TRANSACTION_ID_ALPHABET) for _ in range(TRANSACTION_ID_LENGTH)
        )
        return f"TXN_{suffix}"
