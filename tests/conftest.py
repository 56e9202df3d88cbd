"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payments_query.application.services import PaymentQueryService
from payments_query.domain.entities import Payment, PaymentItem, User
from payments_query.infrastructure.clock import FixedClock
from payments_query.infrastructure.payment_source import InMemoryPaymentSource


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 25, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(fixed_time: datetime) -> FixedClock:
    """A clock frozen at fixed_time."""
    return FixedClock(fixed_time)


@pytest.fixture
def payment_source() -> InMemoryPaymentSource:
    return InMemoryPaymentSource()


@pytest.fixture
def service(payment_source: InMemoryPaymentSource, clock: FixedClock) -> PaymentQueryService:
    return PaymentQueryService(payment_source=payment_source, clock=clock)


@pytest.fixture
def alice() -> User:
    return User(email="alice@example.com", first_name="Alice", last_name="Nowak")


@pytest.fixture
def bob() -> User:
    return User(email="bob@example.com")


ItemFactory = Callable[[str, str, str], PaymentItem]
PaymentFactory = Callable[..., Payment]


@pytest.fixture
def make_item() -> ItemFactory:
    """Build a PaymentItem from string prices: make_item("book", "10.00", "9.00")."""

    def _make(name: str, regular: str, final: str) -> PaymentItem:
        return PaymentItem(name=name, regular_price=Decimal(regular), final_price=Decimal(final))

    return _make


@pytest.fixture
def make_payment(payment_source: InMemoryPaymentSource, alice: User) -> PaymentFactory:
    """Build a Payment and add it to payment_source."""

    def _make(when: datetime, *items: PaymentItem, user: User | None = None) -> Payment:
        payment = Payment.create(payment_date=when, user=user or alice, payment_items=items)
        payment_source.add(payment)
        return payment

    return _make
