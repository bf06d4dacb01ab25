"""
Payment details and results.

Details are one record per payment method. Callers may hand a strategy either
the record itself or a plain mapping; mappings are accepted with camelCase
keys (``cardNumber``) or field names (``card_number``).

Results carry a tagged receipt for method-specific extras. A result is
successful exactly when it has a transaction id.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from payment_patterns.strategies.validators import strip_whitespace


class PaymentMethod(str, Enum):
    """Closed set of payment methods. Values are display labels."""

    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    BANK_TRANSFER = "Bank Transfer"


# ============================================================================
# DETAILS
# ============================================================================

class PaymentDetails(BaseModel):
    """Base for per-method detail records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CreditCardDetails(PaymentDetails):
    card_number: str = Field(repr=False)
    expiry_date: str
    cvv: str = Field(repr=False)

    @property
    def clean_card_number(self) -> str:
        return strip_whitespace(self.card_number)


class PayPalDetails(PaymentDetails):
    email: str
    password: str = Field(repr=False)

    @property
    def local_part(self) -> str:
        return self.email.split("@")[0]


class BankTransferDetails(PaymentDetails):
    account_number: str = Field(repr=False)
    routing_number: str = Field(repr=False)
    account_holder_name: str


# ============================================================================
# RESULTS
# ============================================================================

class CreditCardReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["credit_card"] = "credit_card"
    card_last_four: str


class PayPalReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paypal"] = "paypal"
    paypal_email: str


class BankTransferReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bank_transfer"] = "bank_transfer"
    account_last_four: str
    processing_time: str = "1-3 business days"


Receipt = Annotated[
    Union[CreditCardReceipt, PayPalReceipt, BankTransferReceipt],
    Field(discriminator="kind"),
]


class PaymentResult(BaseModel):
    """Outcome of a single payment attempt."""

    model_config = ConfigDict(frozen=True)

    success: bool
    message: str
    transaction_id: Optional[str] = None
    amount: float
    payment_method: str
    receipt: Optional[Receipt] = None

    @model_validator(mode="after")
    def check_transaction_id(self) -> PaymentResult:
        """transaction_id is present iff the payment succeeded."""
        if self.success and not self.transaction_id:
            raise ValueError("Successful payment requires a transaction_id")
        if not self.success and self.transaction_id is not None:
            raise ValueError("Failed payment must not carry a transaction_id")
        if not self.success and self.receipt is not None:
            raise ValueError("Failed payment must not carry a receipt")
        return self

    @classmethod
    def failure(
        cls, amount: float, payment_method: PaymentMethod | str, message: str
    ) -> PaymentResult:
        return cls(
            success=False,
            message=message,
            transaction_id=None,
            amount=amount,
            payment_method=_label(payment_method),
        )

    def as_dict(self) -> Dict[str, Any]:
        """Flat camelCase rendering, receipt fields merged in."""
        data: Dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "transactionId": self.transaction_id,
            "amount": self.amount,
            "paymentMethod": self.payment_method,
        }
        if self.receipt is not None:
            extras = self.receipt.model_dump(exclude={"kind"})
            data.update({to_camel(key): value for key, value in extras.items()})
        return data


def _label(payment_method: PaymentMethod | str) -> str:
    if isinstance(payment_method, PaymentMethod):
        return payment_method.value
    return payment_method
