from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from payments_query.application.ports import ClockSource
from payments_query.config import settings
from payments_query.domain.value_objects import YearMonth


def _configured_zone() -> tzinfo:
    if settings.timezone.upper() == "UTC":
        return UTC
    return ZoneInfo(settings.timezone)


class SystemClock(ClockSource):
    """Production clock reading the system time in a fixed zone.

    The zone defaults to ``settings.timezone``; "current month" is
    evaluated in that zone.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz if tz is not None else _configured_zone()

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock(ClockSource):
    """Test clock with a controllable fixed timestamp.

    ``year_month`` pins current_year_month() independently of now(); when
    omitted it follows now().

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, fixed_time: datetime, year_month: YearMonth | None = None) -> None:
        self._validate_aware(fixed_time)
        self._fixed_time = fixed_time
        self._year_month = year_month

    def now(self) -> datetime:
        return self._fixed_time

    def current_year_month(self) -> YearMonth:
        if self._year_month is not None:
            return self._year_month
        return super().current_year_month()

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._validate_aware(new_time)
        self._fixed_time = new_time

    def advance(self, delta: timedelta) -> None:
        """Move the fixed time forward (or backward, for negative deltas)."""
        self._fixed_time = self._fixed_time + delta

    def _validate_aware(self, dt: datetime) -> None:
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"datetime must be timezone-aware, got naive {dt.isoformat()}")
