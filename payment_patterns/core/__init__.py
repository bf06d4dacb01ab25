"""Core building blocks shared by every pattern example."""
from .exceptions import (
    ConfigurationError,
    NoPaymentStrategyError,
    NotifierNotRegisteredError,
    PaymentPatternsError,
    UnknownPaymentMethodError,
)
from .timing import Clock, InstantClock, SystemClock, default_clock

__all__ = [
    "Clock",
    "ConfigurationError",
    "InstantClock",
    "NoPaymentStrategyError",
    "NotifierNotRegisteredError",
    "PaymentPatternsError",
    "SystemClock",
    "UnknownPaymentMethodError",
    "default_clock",
]
