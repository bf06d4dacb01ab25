"""
Pytest configuration and fixtures.
"""
from typing import Any, List

import pytest

from payment_patterns.config import Settings, get_settings
from payment_patterns.core.timing import Clock

FIXED_NOW_MS = 1_700_000_000_000


class FakeClock(Clock):
    """Clock that never sleeps and records every wait and timestamp request."""

    def __init__(self, now_ms: int = FIXED_NOW_MS):
        self.now = now_ms
        self.waits: List[int] = []
        self.now_calls = 0

    def now_ms(self) -> int:
        self.now_calls += 1
        return self.now

    def wait(self, milliseconds: int) -> None:
        self.waits.append(milliseconds)


@pytest.fixture(autouse=True)
def no_real_latency(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Keep default-constructed strategies from busy-waiting."""
    monkeypatch.setenv("PAYMENT_SIMULATE_LATENCY", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_name="payment-patterns-test",
        app_env="test",
        log_level="DEBUG",
        log_json=False,
        simulate_latency=False,
        order_payment_seed=42,
    )


@pytest.fixture
def credit_card_details() -> dict[str, Any]:
    return {"cardNumber": "1234567890123456", "expiryDate": "12/25", "cvv": "123"}


@pytest.fixture
def paypal_details() -> dict[str, Any]:
    return {"email": "user@example.com", "password": "securepassword123"}


@pytest.fixture
def bank_details() -> dict[str, Any]:
    return {
        "accountNumber": "1234567890",
        "routingNumber": "123456789",
        "accountHolderName": "John Doe",
    }


@pytest.fixture
def clock_factory() -> type[FakeClock]:
    return FakeClock
