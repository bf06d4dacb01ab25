"""Base payment strategy and registry."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar, Union

import structlog
from pydantic import BaseModel, ValidationError

from payment_patterns.config import get_settings
from payment_patterns.core.exceptions import UnknownPaymentMethodError
from payment_patterns.core.timing import Clock, default_clock
from payment_patterns.strategies.models import (
    PaymentDetails,
    PaymentMethod,
    PaymentResult,
)

logger = structlog.get_logger(__name__)

DetailsT = TypeVar("DetailsT", bound=PaymentDetails)

DetailsInput = Union[PaymentDetails, Mapping[str, Any]]


class PaymentStrategy(ABC, Generic[DetailsT]):
    """
    Abstract base class for all payment strategies.

    Subclasses declare their method, detail record, failure message prefix and
    the settings field holding their processing delay, then implement
    ``check_details`` and ``settle``. The base class handles parsing, the
    simulated delay and turning unexpected exceptions into failed results.
    """

    method: ClassVar[PaymentMethod]
    details_model: ClassVar[type[PaymentDetails]]
    failure_prefix: ClassVar[str]
    delay_setting: ClassVar[str]

    def __init__(self, clock: Optional[Clock] = None, delay_ms: Optional[int] = None):
        self.clock = clock or default_clock()
        if delay_ms is None:
            delay_ms = getattr(get_settings(), self.delay_setting)
        self.delay_ms = delay_ms

    @property
    def name(self) -> str:
        return type(self).__name__

    def parse_details(self, details: DetailsInput) -> DetailsT:
        """Coerce a mapping into this strategy's detail record.

        Raises:
            TypeError: details is a record for another payment method
            ValidationError: the mapping lacks fields or has non-string values
        """
        if isinstance(details, self.details_model):
            return details  # type: ignore[return-value]
        if isinstance(details, BaseModel):
            raise TypeError(
                f"{self.name} expects {self.details_model.__name__}, "
                f"got {type(details).__name__}"
            )
        return self.details_model.model_validate(details)  # type: ignore[return-value]

    def validate_payment_details(self, details: DetailsInput) -> bool:
        try:
            parsed = self.parse_details(details)
        except (TypeError, ValidationError):
            return False
        return self.check_details(parsed)

    def process_payment(self, amount: float, details: DetailsInput) -> PaymentResult:
        """Simulate the processing delay and settle the payment.

        Never raises: any exception becomes a failed result carrying its message.
        """
        try:
            parsed = self.parse_details(details)
            self.clock.wait(self.delay_ms)
            result = self.settle(amount, parsed)
        except Exception as exc:
            logger.warning(
                "payment_processing_error",
                payment_method=self.method.value,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return PaymentResult.failure(amount, self.method, f"{self.failure_prefix}: {exc}")

        if result.success:
            logger.info(
                "payment_processed",
                payment_method=self.method.value,
                amount=amount,
                transaction_id=result.transaction_id,
            )
        else:
            logger.info(
                "payment_declined",
                payment_method=self.method.value,
                amount=amount,
                reason=result.message,
            )
        return result

    def decline(self, amount: float, message: str) -> PaymentResult:
        return PaymentResult.failure(amount, self.method, message)

    @abstractmethod
    def check_details(self, details: DetailsT) -> bool:
        """Structural checks on parsed details."""
        ...

    @abstractmethod
    def settle(self, amount: float, details: DetailsT) -> PaymentResult:
        """Decide the outcome once the delay has elapsed."""
        ...

    def __repr__(self) -> str:
        return f"{self.name}(delay_ms={self.delay_ms})"


# Strategy registry
_registry: dict[PaymentMethod, type[PaymentStrategy]] = {}


def register_strategy(strategy_class: type[PaymentStrategy]) -> type[PaymentStrategy]:
    """Register a strategy class under its payment method."""
    _registry[strategy_class.method] = strategy_class
    return strategy_class


def registered_methods() -> list[PaymentMethod]:
    return list(_registry)


def get_payment_strategy(
    method: Union[PaymentMethod, str],
    clock: Optional[Clock] = None,
    delay_ms: Optional[int] = None,
) -> PaymentStrategy:
    """Build a strategy for a method given as enum, label ("PayPal") or name ("PAYPAL")."""
    resolved: Optional[PaymentMethod] = None
    if isinstance(method, PaymentMethod):
        resolved = method
    elif method in PaymentMethod.__members__:
        resolved = PaymentMethod[method]
    else:
        try:
            resolved = PaymentMethod(method)
        except ValueError:
            resolved = None

    strategy_class = _registry.get(resolved) if resolved is not None else None
    if strategy_class is None:
        raise UnknownPaymentMethodError(method)
    return strategy_class(clock=clock, delay_ms=delay_ms)
