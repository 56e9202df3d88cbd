from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payments_query.domain.entities import Payment


class PaymentSource(ABC):
    """Port for reading the complete set of payment records.

    Contract:
    - get_all() returns every current payment; an empty source returns an
      empty sequence, never None
    - The returned sequence is a snapshot: it must not change while a
      single query iterates over it
    - Ordering is whatever the source provides; queries preserve it where
      they do not sort
    - Errors are raised to the caller as-is; the query layer does not
      retry or wrap them
    """

    @abstractmethod
    def get_all(self) -> Sequence[Payment]:
        """Return all payments currently held by the source."""
