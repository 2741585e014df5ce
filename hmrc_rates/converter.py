"""Convert foreign currency amounts to GBP using HMRC monthly rates."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from hmrc_rates.data import DEFAULT_DATA_DIR, bundled_rate_files
from hmrc_rates.errors import InvalidInputFormat
from hmrc_rates.ingestion.hmrc_xml import HMRCXMLParser
from hmrc_rates.ingestion.models import MonthlyRates
from hmrc_rates.money import GBP, divide, parse_amount
from hmrc_rates.rate_table import RateTable
from hmrc_rates.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd

LOGGER = get_logger(__name__)

__all__ = ["HMRCMonthlyRatesConverter"]


class HMRCMonthlyRatesConverter:
    """Look up HMRC monthly average rates and convert amounts into pounds.

    The default constructor loads the rate documents bundled with the package.
    Use :meth:`from_xml`, :meth:`from_files` or :meth:`from_directory` to work
    with other documents. Every document is parsed before the converter is
    returned, so a malformed source fails construction as a whole.
    """

    __slots__ = ("_table",)

    def __init__(self, table: RateTable | None = None) -> None:
        if table is None:
            table = self._load_files(bundled_rate_files())
        self._table = table

    @classmethod
    def bundled(cls) -> "HMRCMonthlyRatesConverter":
        """Alias for the default constructor."""

        return cls()

    @classmethod
    def empty(cls) -> "HMRCMonthlyRatesConverter":
        return cls(RateTable())

    @classmethod
    def from_xml(cls, xml_data: bytes | str) -> "HMRCMonthlyRatesConverter":
        """Build a converter from a single HMRC monthly document."""

        return cls(RateTable([HMRCXMLParser().parse(xml_data)]))

    @classmethod
    def from_files(cls, paths: Iterable[str | Path]) -> "HMRCMonthlyRatesConverter":
        return cls(cls._load_files(Path(path) for path in paths))

    @classmethod
    def from_directory(
        cls,
        resource_dir: str | Path = DEFAULT_DATA_DIR,
        *,
        pattern: str = "*.xml",
        allow_empty: bool = False,
    ) -> "HMRCMonthlyRatesConverter":
        """Load every document in ``resource_dir`` matching ``pattern``."""

        directory = Path(resource_dir)
        if not directory.is_dir():
            raise NotADirectoryError(directory)
        paths = sorted(path for path in directory.glob(pattern) if path.is_file())
        if not paths and not allow_empty:
            raise ValueError(f"No rate documents matching {pattern!r} in {directory}")
        return cls(cls._load_files(paths))

    @staticmethod
    def _load_files(paths: Iterable[Path]) -> RateTable:
        parser = HMRCXMLParser()
        table = RateTable()
        for path in paths:
            table.insert(parser.parse_file(path))
        LOGGER.info(
            "Loaded %s HMRC rate period(s)%s",
            len(table),
            f" from {table.starts()[0]} to {table.starts()[-1]}" if table else "",
        )
        return table

    def load_xml(self, xml_data: bytes | str) -> MonthlyRates:
        """Merge another document; a period with a known start date replaces the old one."""

        period = HMRCXMLParser().parse(xml_data)
        if self._table.insert(period) is not None:
            LOGGER.info("Replaced HMRC rates for period starting %s", period.period_start)
        return period

    def convert(self, value: str, on: date) -> GBP:
        """Convert ``"<amount> <currency>"`` (e.g. ``"100.00 USD"``) into GBP."""

        parts = value.split()
        if len(parts) != 2:
            raise InvalidInputFormat(value)
        amount_text, currency = parts
        return self.convert_amount(parse_amount(amount_text), currency, on)

    def convert_amount(self, amount: Decimal | str | int, currency: str, on: date) -> GBP:
        """Convert ``amount`` of ``currency`` into GBP at the rate in force on ``on``."""

        value = parse_amount(amount)
        rate = self.rate_for(currency, on)
        return GBP(divide(value, rate))

    def rate_for(self, currency: str, on: date) -> Decimal:
        """Return the rate (units of ``currency`` per pound) in force on ``on``."""

        return self._table.rate_for(currency.strip().upper(), on)

    def rates_for(self, on: date) -> MonthlyRates:
        return self._table.period_for(on)

    def currencies(self, on: date) -> tuple[str, ...]:
        return tuple(sorted(self._table.period_for(on).rates))

    def periods(self) -> tuple[date, ...]:
        return self._table.starts()

    def to_frame(self) -> "pd.DataFrame":
        return self._table.to_frame()

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(periods={len(self._table)})"
