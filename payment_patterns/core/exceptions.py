"""
Exception classes for the payment patterns package.

Only configuration mistakes are raised. Declined cards, bad details and
similar business outcomes are returned as failed ``PaymentResult`` objects
so callers handle them as data, not control flow.
"""

from typing import Any, Dict, Optional


class PaymentPatternsError(Exception):
    """
    Base exception for all package errors.

    Carries an error code for programmatic handling and any extra keyword
    arguments as metadata.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        recovery_hint: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.recovery_hint = recovery_hint
        self.metadata = kwargs

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for structured logs and API-style responses"""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "type": self.__class__.__name__,
            }
        }


# ============================================================================
# CONFIGURATION ERRORS
# ============================================================================

class ConfigurationError(PaymentPatternsError):
    """Object wiring is incomplete. Fatal for the call that hit it."""

    def __init__(self, message: str, error_code: str = "configuration_error", **kwargs: Any):
        super().__init__(message=message, error_code=error_code, **kwargs)


class NoPaymentStrategyError(ConfigurationError):
    """PaymentProcessor used before any strategy was assigned."""

    def __init__(self) -> None:
        super().__init__(
            message="No payment strategy set. Please set a payment strategy first.",
            error_code="no_payment_strategy",
            recovery_hint="Call set_payment_strategy() before process_payment()",
        )


class UnknownPaymentMethodError(ConfigurationError):
    """No strategy class is registered for the requested payment method."""

    def __init__(self, method: Any):
        super().__init__(
            message=f"No payment strategy registered for method {method!r}.",
            error_code="unknown_payment_method",
            method=method,
        )


class NotifierNotRegisteredError(ConfigurationError):
    """NotifierFactory asked for a channel nobody registered."""

    def __init__(self, channel: str):
        super().__init__(
            message=f"Notifier for channel {channel} not registered.",
            error_code="notifier_not_registered",
            channel=channel,
        )
