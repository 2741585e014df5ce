"""Tests for the public package surface."""

import hmrc_rates
from hmrc_rates import ConversionError, __version__


def test_version_is_exposed() -> None:
    assert isinstance(__version__, str)
    assert __version__


def test_public_names_resolve() -> None:
    for name in hmrc_rates.__all__:
        assert hasattr(hmrc_rates, name), name


def test_errors_share_a_base_class() -> None:
    for name in (
        "InvalidInputFormat",
        "ValueParseError",
        "CurrencyNotFound",
        "CurrencyCodeMissing",
        "DateOutOfRange",
        "XmlParseError",
        "DateParseError",
        "RateParseError",
    ):
        assert issubclass(getattr(hmrc_rates, name), ConversionError)
