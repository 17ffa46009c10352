"""Date window utilities for period filtering"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from budgetmate.domain.exceptions import InvalidTimeframeError
from budgetmate.domain.models import TransactionRecord

TIMEFRAMES = ("week", "month", "quarter")

TIMEFRAME_LABELS = {"week": "this week", "month": "this month", "quarter": "this quarter"}

_ONE_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class DateWindow:
    """Closed interval [start, end] of timestamps"""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        # Naive and aware timestamps may meet here; compare everything as UTC
        return ensure_utc(self.start) <= ensure_utc(moment) <= ensure_utc(self.end)

    def includes(self, record: TransactionRecord) -> bool:
        """Predicate form, usable as a breakdown window filter"""
        return self.contains(record.occurred_at)

    @property
    def days(self) -> float:
        return (self.end - self.start).total_seconds() / 86400


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive timestamps as UTC (SQLite drops tzinfo on the way back)"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def shift_months(moment: datetime, months: int) -> datetime:
    """Move a timestamp by whole calendar months, clamping the day"""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def start_of_month(moment: datetime) -> datetime:
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def start_of_quarter(moment: datetime) -> datetime:
    first_month = 3 * ((moment.month - 1) // 3) + 1
    return start_of_month(moment).replace(month=first_month)


def trailing_window(now: datetime, days: int) -> DateWindow:
    """The last `days` days up to and including now"""
    return DateWindow(start=now - timedelta(days=days), end=now)


def month_window(now: datetime) -> DateWindow:
    return DateWindow(start=start_of_month(now), end=now)


def quarter_window(now: datetime) -> DateWindow:
    return DateWindow(start=start_of_quarter(now), end=now)


def timeframe_window(timeframe: str, now: datetime) -> DateWindow:
    """
    Window for an analysis period ending at now.

    - week: trailing 7 days
    - month: calendar month to date
    - quarter: calendar quarter to date
    """
    if timeframe == "week":
        return trailing_window(now, 7)
    if timeframe == "month":
        return month_window(now)
    if timeframe == "quarter":
        return quarter_window(now)
    raise InvalidTimeframeError(f"Unsupported timeframe: {timeframe!r} (expected one of {', '.join(TIMEFRAMES)})")


def previous_window(timeframe: str, now: datetime) -> DateWindow:
    """
    Same elapsed length as timeframe_window, one period earlier.

    Month-to-date is compared against the previous month over the same number
    of elapsed days; the previous window never overlaps the current one.
    """
    current = timeframe_window(timeframe, now)
    if timeframe == "week":
        return DateWindow(start=current.start - timedelta(days=7), end=current.start - _ONE_TICK)

    months_back = 1 if timeframe == "month" else 3
    start = shift_months(current.start, -months_back)
    end = min(start + (now - current.start), current.start - _ONE_TICK)
    return DateWindow(start=start, end=end)
