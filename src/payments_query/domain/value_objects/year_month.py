from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_query.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

MIN_YEAR = 1
MAX_YEAR = 9999
_ISO_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month, used as the key for monthly filtering and totals.

    Ordering follows the calendar (year first, then month).
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise InvalidYearMonthError(f"year must be an int, got {self.year!r}")
        if isinstance(self.month, bool) or not isinstance(self.month, int):
            raise InvalidYearMonthError(f"month must be an int, got {self.month!r}")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidYearMonthError(
                f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {self.year}"
            )
        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def of(cls, moment: datetime) -> YearMonth:
        """Return the month of ``moment`` as seen in its own time zone."""
        return cls(year=moment.year, month=moment.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse an ISO ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If the text is not of the form YYYY-MM
                or the month is out of range.
        """
        match = _ISO_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise InvalidYearMonthError(f"Expected YYYY-MM, got {text!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, moment: datetime) -> bool:
        return moment.year == self.year and moment.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
