"""Public interface for the hmrc_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from hmrc_rates.converter import HMRCMonthlyRatesConverter
from hmrc_rates.errors import (
    ConversionError,
    CurrencyCodeMissing,
    CurrencyNotFound,
    DateOutOfRange,
    DateParseError,
    InvalidInputFormat,
    RateParseError,
    ValueParseError,
    XmlParseError,
)
from hmrc_rates.ingestion.hmrc_xml import HMRCXMLParser, parse_monthly_rates
from hmrc_rates.ingestion.models import MonthlyRates
from hmrc_rates.money import GBP
from hmrc_rates.rate_table import RateTable

__all__ = [
    "__version__",
    "GBP",
    "HMRCMonthlyRatesConverter",
    "HMRCXMLParser",
    "MonthlyRates",
    "RateTable",
    "parse_monthly_rates",
    "ConversionError",
    "CurrencyCodeMissing",
    "CurrencyNotFound",
    "DateOutOfRange",
    "DateParseError",
    "InvalidInputFormat",
    "RateParseError",
    "ValueParseError",
    "XmlParseError",
]

try:
    __version__ = importlib_metadata.version("hmrc-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
