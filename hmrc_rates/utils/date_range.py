"""Date helpers for HMRC reporting periods."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Final, Tuple

PERIOD_DATE_FORMAT: Final[str] = "%d/%b/%Y"
ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, date):
        return value
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def parse_period_date(value: str) -> date:
    """Parse ``01/Aug/2025`` style dates used by HMRC period headers."""

    return datetime.strptime(value.strip(), PERIOD_DATE_FORMAT).date()


def format_period_date(day: date) -> str:
    """Inverse of :func:`parse_period_date`."""

    return day.strftime(PERIOD_DATE_FORMAT)


def end_of_month(day: date) -> date:
    """Return the last day of the month for ``day``."""

    if day.month == 12:
        return date(day.year, 12, 31)
    first_next_month = date(day.year, day.month + 1, 1)
    return first_next_month - timedelta(days=1)


def month_range(day: date) -> DateRange:
    """Return the calendar month containing ``day``."""

    return DateRange(start=day.replace(day=1), end=end_of_month(day))


__all__ = [
    "DateRange",
    "ISO_DATE_FORMAT",
    "PERIOD_DATE_FORMAT",
    "end_of_month",
    "format_period_date",
    "month_range",
    "parse_date",
    "parse_period_date",
]
