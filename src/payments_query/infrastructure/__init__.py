"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Payment Source: In-memory holder of payment records
- Clock: System and fixed clocks for "now" and "current month"
- Observability: Structured JSON logging setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from payments_query.infrastructure.clock import FixedClock, SystemClock
from payments_query.infrastructure.payment_source import InMemoryPaymentSource

__all__ = [
    "FixedClock",
    "InMemoryPaymentSource",
    "SystemClock",
]
