"""
Clock abstraction for simulated processing delays.

Strategies never call ``time`` directly. They ask a ``Clock`` for the current
epoch milliseconds (used in transaction ids) and to wait out the simulated
processing delay. Production code uses ``SystemClock``, which busy-waits and
holds the calling thread for the whole delay. Tests and latency-free runs use
``InstantClock``.
"""
import time
from abc import ABC, abstractmethod

from payment_patterns.config import get_settings


class Clock(ABC):
    """Source of time and delays for payment strategies."""

    @abstractmethod
    def now_ms(self) -> int:
        """Milliseconds since the Unix epoch."""

    @abstractmethod
    def wait(self, milliseconds: int) -> None:
        """Block for at least ``milliseconds``."""


class SystemClock(Clock):
    """Wall clock with a blocking busy-wait."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000

    def wait(self, milliseconds: int) -> None:
        deadline = time.monotonic() + milliseconds / 1000.0
        while time.monotonic() < deadline:
            pass


class InstantClock(SystemClock):
    """Wall clock whose waits return immediately."""

    def wait(self, milliseconds: int) -> None:
        return None


def default_clock() -> Clock:
    """Clock selected by the ``simulate_latency`` setting."""
    if get_settings().simulate_latency:
        return SystemClock()
    return InstantClock()
