"""
Strategy pattern: interchangeable payment methods behind one processor.

Importing this package registers every concrete strategy, so
``get_payment_strategy`` covers the full ``PaymentMethod`` enum.
"""
from .bank_transfer import BankTransferPayment
from .base import PaymentStrategy, get_payment_strategy, register_strategy, registered_methods
from .credit_card import CreditCardPayment
from .models import (
    BankTransferDetails,
    BankTransferReceipt,
    CreditCardDetails,
    CreditCardReceipt,
    PaymentDetails,
    PaymentMethod,
    PaymentResult,
    PayPalDetails,
    PayPalReceipt,
)
from .paypal import PayPalPayment
from .processor import INVALID_DETAILS_MESSAGE, PaymentProcessor

__all__ = [
    "BankTransferDetails",
    "BankTransferPayment",
    "BankTransferReceipt",
    "CreditCardDetails",
    "CreditCardPayment",
    "CreditCardReceipt",
    "INVALID_DETAILS_MESSAGE",
    "PaymentDetails",
    "PaymentMethod",
    "PaymentProcessor",
    "PaymentResult",
    "PaymentStrategy",
    "PayPalDetails",
    "PayPalPayment",
    "PayPalReceipt",
    "get_payment_strategy",
    "register_strategy",
    "registered_methods",
]
