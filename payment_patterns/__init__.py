"""
Payment Patterns - Design Patterns Around a Checkout

Three small, independent examples:
1. Strategy: interchangeable payment methods behind a PaymentProcessor
2. Factory: channel-based notifier dispatch for booking confirmations
3. Facade: one call that runs catalog lookup, payment and order creation

Backends are simulated; nothing touches the network or disk.
"""

__version__ = "0.1.0"
