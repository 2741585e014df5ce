"""Parse HMRC ``exrates-monthly`` XML documents into ``MonthlyRates`` records."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Final, Iterator

from hmrc_rates.errors import (
    ConversionError,
    CurrencyCodeMissing,
    DateParseError,
    RateParseError,
    XmlParseError,
)
from hmrc_rates.ingestion.models import MonthlyRates
from hmrc_rates.utils.date_range import format_period_date, month_range, parse_period_date
from hmrc_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

PERIOD_ELEMENT: Final[str] = "exchangeRateMonthList"
PERIOD_ATTRIBUTE: Final[str] = "Period"
PERIOD_SEPARATOR: Final[str] = " to "
RATE_ELEMENT: Final[str] = "exchangeRate"
CURRENCY_CODE_ELEMENT: Final[str] = "currencyCode"
RATE_VALUE_ELEMENT: Final[str] = "rateNew"


def _local_name(tag: object) -> str:
    # ElementTree spells namespaced tags as ``{uri}name``.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str | None:
    for child in element:
        if _local_name(child.tag) == name:
            text = (child.text or "").strip()
            return text or None
    return None


class HMRCXMLParser:
    """Convert HMRC monthly exchange rate XML into :class:`MonthlyRates`."""

    def parse(self, xml_data: bytes | str) -> MonthlyRates:
        root = self._parse_tree(xml_data)
        period_element = self._find_period_element(root)
        period_start, period_end = self._parse_period(period_element)
        rates = dict(self._extract_rates(period_element, period_start))
        LOGGER.debug(
            "Parsed HMRC period %s to %s with %s currencies",
            period_start,
            period_end,
            len(rates),
        )
        return MonthlyRates(period_start=period_start, period_end=period_end, rates=rates)

    def parse_file(self, path: str | Path) -> MonthlyRates:
        """Parse ``path``; failures keep their type and gain the file name."""

        xml_path = Path(path)
        if not xml_path.exists():
            raise FileNotFoundError(xml_path)
        try:
            return self.parse(xml_path.read_bytes())
        except ConversionError as exc:
            exc.add_note(f"while parsing {xml_path}")
            raise

    @staticmethod
    def _parse_tree(xml_data: bytes | str) -> ET.Element:
        try:
            return ET.fromstring(xml_data)
        except ET.ParseError as exc:
            raise XmlParseError(str(exc)) from exc

    @staticmethod
    def _find_period_element(root: ET.Element) -> ET.Element:
        for element in root.iter():
            if _local_name(element.tag) == PERIOD_ELEMENT:
                return element
        raise DateParseError(f"No {PERIOD_ELEMENT} element found")

    @staticmethod
    def _parse_period(element: ET.Element) -> tuple[date, date]:
        raw = element.get(PERIOD_ATTRIBUTE)
        if raw is None:
            raise DateParseError(f"Missing {PERIOD_ATTRIBUTE} attribute")
        parts = raw.split(PERIOD_SEPARATOR)
        if len(parts) < 2:
            raise DateParseError(f"Invalid Period format: {raw}")
        try:
            start = parse_period_date(parts[0])
            end = parse_period_date(parts[1])
        except ValueError as exc:
            raise DateParseError(f"Invalid Period date in {raw!r}: {exc}") from exc
        if start.day != 1:
            raise DateParseError(
                f"Period start {format_period_date(start)} is not the first day of a month"
            )
        month = month_range(start)
        if end != month.end:
            raise DateParseError(
                f"Period end {format_period_date(end)} is not the last day of the month "
                f"(expected {format_period_date(month.end)})"
            )
        return start, end

    @staticmethod
    def _extract_rates(
        element: ET.Element, period_start: date
    ) -> Iterator[tuple[str, Decimal]]:
        seen: set[str] = set()
        position = 0
        for entry in element.iter():
            if _local_name(entry.tag) != RATE_ELEMENT:
                continue
            position += 1
            currency = _child_text(entry, CURRENCY_CODE_ELEMENT)
            if currency is None:
                raise CurrencyCodeMissing(period_start, position)
            rate_text = _child_text(entry, RATE_VALUE_ELEMENT)
            if rate_text is None:
                raise RateParseError(f"Missing {RATE_VALUE_ELEMENT} for {currency}")
            try:
                rate = Decimal(rate_text)
            except InvalidOperation as exc:
                raise RateParseError(f"{rate_text!r} for {currency} is not a number") from exc
            if not rate.is_finite() or rate <= 0:
                raise RateParseError(f"{rate_text!r} for {currency} is not a positive rate")
            if currency in seen:
                LOGGER.warning(
                    "Currency %s listed twice for period %s; keeping the last rate",
                    currency,
                    period_start,
                )
            seen.add(currency)
            yield currency, rate


def parse_monthly_rates(xml_data: bytes | str) -> MonthlyRates:
    """Parse a single HMRC monthly XML document."""

    return HMRCXMLParser().parse(xml_data)


__all__ = [
    "HMRCXMLParser",
    "PERIOD_SEPARATOR",
    "parse_monthly_rates",
]
