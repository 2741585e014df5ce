"""Date-indexed storage for HMRC monthly rates."""

from __future__ import annotations

from bisect import bisect_right, insort
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Iterator

from hmrc_rates.errors import CurrencyNotFound, DateOutOfRange
from hmrc_rates.ingestion.models import MonthlyRates

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import pandas as pd

FRAME_COLUMNS = ("period_start", "period_end", "currency", "rate")


class RateTable:
    """Periods keyed by start date, answering "rate in force" lookups.

    Start dates are kept in a sorted list so the period in force for a date is
    found with a binary search. A period stays in force until a later period
    starts; there is no upper bound after the most recent one.
    """

    __slots__ = ("_starts", "_periods")

    def __init__(self, periods: Iterable[MonthlyRates] = ()) -> None:
        self._starts: list[date] = []
        self._periods: dict[date, MonthlyRates] = {}
        for period in periods:
            self.insert(period)

    def insert(self, period: MonthlyRates) -> MonthlyRates | None:
        """Add ``period``; an existing period with the same start is replaced and returned."""

        previous = self._periods.get(period.period_start)
        if previous is None:
            insort(self._starts, period.period_start)
        self._periods[period.period_start] = period
        return previous

    def period_for(self, on: date) -> MonthlyRates:
        index = bisect_right(self._starts, on)
        if index == 0:
            raise DateOutOfRange(on)
        return self._periods[self._starts[index - 1]]

    def rate_for(self, currency: str, on: date) -> Decimal:
        """Return the rate for an already normalised ``currency`` in force on ``on``."""

        rate = self.period_for(on).get(currency)
        if rate is None:
            raise CurrencyNotFound(currency, on)
        return rate

    def starts(self) -> tuple[date, ...]:
        return tuple(self._starts)

    def to_frame(self) -> "pd.DataFrame":
        """Flatten the table into one row per period and currency."""

        import pandas as pd

        rows = [
            (period.period_start, period.period_end, currency, rate)
            for period in self
            for currency, rate in sorted(period.rates.items())
        ]
        return pd.DataFrame(rows, columns=list(FRAME_COLUMNS))

    def __iter__(self) -> Iterator[MonthlyRates]:
        return (self._periods[start] for start in self._starts)

    def __len__(self) -> int:
        return len(self._starts)

    def __contains__(self, start: object) -> bool:
        return start in self._periods


__all__ = ["FRAME_COLUMNS", "RateTable"]
