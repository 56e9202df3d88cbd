from __future__ import annotations

from typing import TYPE_CHECKING

from payments_query.application.ports import PaymentSource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_query.domain.entities import Payment


class InMemoryPaymentSource(PaymentSource):
    """In-memory payment source for tests and embedding.

    Implementation notes:
    - Keeps insertion order; get_all() returns payments in that order
    - get_all() returns a new list each call, so a snapshot taken by one
      query is unaffected by later add() calls
    - Entities are frozen, so the snapshot shares them rather than copying
    - NOT thread-safe for concurrent add(); reads of a stable source are fine
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: list[Payment] = list(payments)

    def add(self, payment: Payment) -> None:
        self._payments.append(payment)

    def get_all(self) -> list[Payment]:
        return list(self._payments)
