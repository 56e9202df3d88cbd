"""Data Transfer Objects for aggregated query results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from payments_query.domain.value_objects import YearMonth


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    """Totals for one calendar month.

    Invariant: discount_total == regular_total - final_total.
    """

    year_month: YearMonth
    payment_count: int
    item_count: int
    regular_total: Decimal
    final_total: Decimal
    discount_total: Decimal
