"""Exceptions raised while loading HMRC rate tables or converting amounts."""

from __future__ import annotations

from datetime import date

__all__ = [
    "ConversionError",
    "InvalidInputFormat",
    "ValueParseError",
    "CurrencyNotFound",
    "CurrencyCodeMissing",
    "DateOutOfRange",
    "XmlParseError",
    "DateParseError",
    "RateParseError",
]


class ConversionError(Exception):
    """Base error for the package."""


class InvalidInputFormat(ConversionError):
    """Combined ``VALUE CURRENCY`` input did not contain exactly two tokens."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid input format: '{value}'. Expected format 'VALUE CURRENCY'.")


class ValueParseError(ConversionError):
    """The amount could not be read as a decimal number."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Failed to parse value: {value!r}")


class CurrencyNotFound(ConversionError):
    """The period in force for ``on`` has no rate for ``currency``."""

    def __init__(self, currency: str, on: date) -> None:
        self.currency = currency
        self.on = on
        super().__init__(f"Currency not found: '{currency}' for date {on.isoformat()}.")


class CurrencyCodeMissing(CurrencyNotFound):
    """An ``exchangeRate`` entry had no usable ``currencyCode`` node."""

    def __init__(self, on: date, position: int) -> None:
        self.position = position
        ConversionError.__init__(
            self,
            f"Currency code missing for exchange rate entry #{position} "
            f"in period starting {on.isoformat()}.",
        )
        self.currency = ""
        self.on = on


class DateOutOfRange(ConversionError):
    """No period starts on or before ``on``."""

    def __init__(self, on: date) -> None:
        self.on = on
        super().__init__(f"No exchange rate data available for date: {on.isoformat()}.")


class XmlParseError(ConversionError):
    """The rate document is not well-formed XML."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse XML data: {detail}")


class DateParseError(ConversionError):
    """The ``Period`` attribute is missing, malformed or not a whole month."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse date: {detail}")


class RateParseError(ConversionError):
    """A ``rateNew`` node is missing or is not a positive decimal."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse rate: {detail}")
