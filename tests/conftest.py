from __future__ import annotations

from typing import Callable, Mapping

import pytest

RATE_ENTRY = """
  <exchangeRate>
    <countryName>{country}</countryName>
    <countryCode>XX</countryCode>
    <currencyName>Unit</currencyName>
    <currencyCode>{code}</currencyCode>
    <rateNew>{rate}</rateNew>
  </exchangeRate>"""


def _render(period: str, rates: Mapping[str, str]) -> str:
    entries = "".join(
        RATE_ENTRY.format(country=f"Country {code}", code=code, rate=rate)
        for code, rate in rates.items()
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<exchangeRateMonthList Period="{period}">{entries}\n</exchangeRateMonthList>\n'
    )


@pytest.fixture
def period_xml() -> Callable[..., bytes]:
    """Return a factory that renders an HMRC monthly document as bytes."""

    def _factory(period: str = "01/Aug/2025 to 31/Aug/2025", rates: Mapping[str, str] | None = None) -> bytes:
        if rates is None:
            rates = {"USD": "1.3541", "EUR": "1.1547"}
        return _render(period, rates).encode("utf-8")

    return _factory
