from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from payments_query.application.dtos import MonthlySummary
from payments_query.domain.entities.payment import ZERO
from payments_query.domain.exceptions import InvalidDaysError, InvalidThresholdError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from datetime import datetime

    from payments_query.application.ports import ClockSource, PaymentSource
    from payments_query.domain.entities import Payment, PaymentItem
    from payments_query.domain.value_objects import YearMonth

logger = logging.getLogger(__name__)


class PaymentQueryService:
    """Read-only query and aggregation engine over a PaymentSource.

    Responsibilities:
    - Read the full payment list fresh from the source on every call
    - Apply a filter/sort/map/reduce pipeline and return a new collection
    - Read "now" and "current month" only through the injected ClockSource

    The service holds no state besides its two collaborators. Stored
    payments are never mutated, and errors from the collaborators
    propagate unchanged.

    Sorting relies on ``sorted()``, which is guaranteed stable: payments
    with equal keys keep their source order, in both directions.
    """

    def __init__(self, payment_source: PaymentSource, clock: ClockSource) -> None:
        self._payment_source = payment_source
        self._clock = clock

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sorted_by_date_ascending(self) -> list[Payment]:
        return self._sorted("sorted_by_date_ascending", _payment_date, reverse=False)

    def sorted_by_date_descending(self) -> list[Payment]:
        return self._sorted("sorted_by_date_descending", _payment_date, reverse=True)

    def sorted_by_item_count_ascending(self) -> list[Payment]:
        return self._sorted("sorted_by_item_count_ascending", _item_count, reverse=False)

    def sorted_by_item_count_descending(self) -> list[Payment]:
        return self._sorted("sorted_by_item_count_descending", _item_count, reverse=True)

    def _sorted(
        self, operation: str, key: Callable[[Payment], Any], *, reverse: bool
    ) -> list[Payment]:
        result = sorted(self._payments(), key=key, reverse=reverse)
        logger.debug("Payments sorted", extra={"operation": operation, "count": len(result)})
        return result

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def for_month(self, year_month: YearMonth) -> list[Payment]:
        """Payments dated within ``year_month``, in source order."""
        result = [p for p in self._payments() if year_month.contains(p.payment_date)]
        logger.debug(
            "Payments filtered by month",
            extra={"operation": "for_month", "year_month": str(year_month), "count": len(result)},
        )
        return result

    def for_current_month(self) -> list[Payment]:
        return self.for_month(self._clock.current_year_month())

    def for_last_days(self, days: int) -> list[Payment]:
        """Payments strictly between ``now - days`` and ``now``.

        Both ends are exclusive, so ``days=0`` always yields an empty list.

        Raises:
            InvalidDaysError: If days is negative or not an integer.
        """
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidDaysError(f"days must be an int, got {type(days).__name__}")
        if days < 0:
            raise InvalidDaysError(f"days cannot be negative, got {days}")

        now = self._clock.now()
        window_start = now - timedelta(days=days)
        result = [p for p in self._payments() if window_start < p.payment_date < now]
        logger.debug(
            "Payments filtered by trailing window",
            extra={"operation": "for_last_days", "days": days, "count": len(result)},
        )
        return result

    def with_exactly_one_item(self) -> set[Payment]:
        result = {p for p in self._payments() if p.item_count == 1}
        logger.debug(
            "Payments filtered by item count",
            extra={"operation": "with_exactly_one_item", "count": len(result)},
        )
        return result

    def payments_over_value(self, threshold: int | Decimal) -> set[Payment]:
        """Payments whose value is strictly greater than ``threshold``.

        Raises:
            InvalidThresholdError: If threshold is not an int or Decimal.
        """
        limit = _as_threshold(threshold)
        result = {p for p in self._payments() if self.payment_value(p) > limit}
        logger.debug(
            "Payments filtered by value",
            extra={
                "operation": "payments_over_value",
                "threshold": str(limit),
                "count": len(result),
            },
        )
        return result

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Items of every payment owned by ``email``, payment order then item order.

        The match is exact and case-sensitive; an unknown email gives an
        empty list.
        """
        result = [
            item
            for payment in self._payments()
            if payment.user.email == email
            for item in payment.payment_items
        ]
        logger.debug(
            "Items collected for user",
            extra={"operation": "items_for_user_email", "count": len(result)},
        )
        return result

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    def products_sold_this_month(self) -> set[str]:
        result = {item.name for item in _items(self.for_current_month())}
        logger.debug(
            "Products collected for current month",
            extra={"operation": "products_sold_this_month", "count": len(result)},
        )
        return result

    def total_for_month(self, year_month: YearMonth) -> Decimal:
        return sum((item.final_price for item in _items(self.for_month(year_month))), ZERO)

    def regular_total_for_month(self, year_month: YearMonth) -> Decimal:
        return sum((item.regular_price for item in _items(self.for_month(year_month))), ZERO)

    def discount_total_for_month(self, year_month: YearMonth) -> Decimal:
        return sum((item.discount for item in _items(self.for_month(year_month))), ZERO)

    def monthly_summary(self, year_month: YearMonth) -> MonthlySummary:
        """All monthly totals computed from a single read of the source."""
        payments = self.for_month(year_month)
        regular_total = ZERO
        final_total = ZERO
        item_count = 0
        for item in _items(payments):
            regular_total += item.regular_price
            final_total += item.final_price
            item_count += 1

        return MonthlySummary(
            year_month=year_month,
            payment_count=len(payments),
            item_count=item_count,
            regular_total=regular_total,
            final_total=final_total,
            discount_total=regular_total - final_total,
        )

    def payment_value(self, payment: Payment) -> Decimal:
        return payment.total_final_price()

    def _payments(self) -> list[Payment]:
        return list(self._payment_source.get_all())


def _payment_date(payment: Payment) -> datetime:
    return payment.payment_date


def _item_count(payment: Payment) -> int:
    return payment.item_count


def _items(payments: Iterable[Payment]) -> Iterator[PaymentItem]:
    for payment in payments:
        yield from payment.payment_items


def _as_threshold(threshold: int | Decimal) -> Decimal:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, Decimal)):
        raise InvalidThresholdError(
            f"threshold must be an int or Decimal, got {type(threshold).__name__}"
        )
    if isinstance(threshold, Decimal) and not threshold.is_finite():
        raise InvalidThresholdError(f"threshold must be finite, got {threshold}")
    return Decimal(threshold)
