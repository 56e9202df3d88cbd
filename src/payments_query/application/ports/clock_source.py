from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payments_query.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class ClockSource(ABC):
    """Port for "current time" reads.

    Contract:
    - now() MUST return a timezone-aware datetime
    - current_year_month() MUST agree with now() unless an implementation
      deliberately overrides it

    Queries never call datetime.now() directly, so every time-dependent
    query is deterministic under a fixed clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...

    def current_year_month(self) -> YearMonth:
        """Return the calendar month of now(), in now()'s zone."""
        return YearMonth.of(self.now())
