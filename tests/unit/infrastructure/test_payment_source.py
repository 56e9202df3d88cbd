"""Tests for InMemoryPaymentSource.

Tests cover:
- PaymentSource interface implementation
- Insertion order is preserved
- get_all() returns an independent snapshot
"""

from datetime import UTC, datetime

import pytest

from payments_query.application.ports import PaymentSource
from payments_query.domain.entities import Payment, User
from payments_query.infrastructure.payment_source import InMemoryPaymentSource


@pytest.fixture
def user() -> User:
    return User(email="ola@example.com")


@pytest.fixture
def payments(user: User) -> list[Payment]:
    return [
        Payment.create(payment_date=datetime(2024, 1, day, tzinfo=UTC), user=user)
        for day in (3, 1, 2)
    ]


class TestInMemoryPaymentSource:
    def test_implements_payment_source_interface(self) -> None:
        assert isinstance(InMemoryPaymentSource(), PaymentSource)

    def test_empty_source_returns_empty_list(self) -> None:
        assert InMemoryPaymentSource().get_all() == []

    def test_preserves_initial_order(self, payments: list[Payment]) -> None:
        source = InMemoryPaymentSource(payments)

        assert source.get_all() == payments

    def test_add_appends(self, payments: list[Payment], user: User) -> None:
        source = InMemoryPaymentSource(payments)
        extra = Payment.create(payment_date=datetime(2024, 2, 1, tzinfo=UTC), user=user)

        source.add(extra)

        assert source.get_all() == [*payments, extra]

    def test_snapshot_unaffected_by_later_add(self, payments: list[Payment], user: User) -> None:
        source = InMemoryPaymentSource(payments)
        snapshot = source.get_all()

        source.add(Payment.create(payment_date=datetime(2024, 2, 1, tzinfo=UTC), user=user))

        assert snapshot == payments

    def test_mutating_snapshot_does_not_affect_source(self, payments: list[Payment]) -> None:
        source = InMemoryPaymentSource(payments)

        source.get_all().clear()

        assert len(source.get_all()) == 3

    def test_constructor_copies_input(self, payments: list[Payment]) -> None:
        source = InMemoryPaymentSource(payments)

        payments.clear()

        assert len(source.get_all()) == 3

    def test_snapshot_shares_entities(self, payments: list[Payment]) -> None:
        source = InMemoryPaymentSource(payments)

        assert source.get_all()[0] is payments[0]
