"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from hmrc_rates.utils.date_range import DateRange


@dataclass(frozen=True, slots=True)
class MonthlyRates:
    """One published HMRC period: its dates and the rate for each currency."""

    period_start: date
    period_end: date
    rates: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.rates, MappingProxyType):
            object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    @property
    def period(self) -> DateRange:
        return DateRange(start=self.period_start, end=self.period_end)

    def get(self, currency: str) -> Decimal | None:
        return self.rates.get(currency)

    def __len__(self) -> int:
        return len(self.rates)
