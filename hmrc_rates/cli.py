"""Command line helpers for converting amounts with HMRC monthly rates."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Sequence

from hmrc_rates.converter import HMRCMonthlyRatesConverter
from hmrc_rates.errors import ConversionError
from hmrc_rates.utils.date_range import parse_date
from hmrc_rates.utils.logger import configure_logging

__all__ = ["build_parser", "main"]


def _iso_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}; expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hmrc-rates", description=__doc__)
    parser.add_argument(
        "--xml",
        dest="xml_paths",
        action="append",
        metavar="PATH",
        help="HMRC monthly XML file to load instead of the bundled data (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log which rate periods were loaded",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert an amount into GBP")
    convert.add_argument("value", help="Amount, e.g. 100.00")
    convert.add_argument("currency", help="Currency code, e.g. USD")
    convert.add_argument("--date", dest="on", type=_iso_date, help="Date (YYYY-MM-DD), defaults to today")

    rates = subparsers.add_parser("rates", help="List the rates in force on a date")
    rates.add_argument("--date", dest="on", type=_iso_date, help="Date (YYYY-MM-DD), defaults to today")

    subparsers.add_parser("periods", help="List the start date of every loaded period")
    return parser


def _build_converter(args: argparse.Namespace) -> HMRCMonthlyRatesConverter:
    if args.xml_paths:
        return HMRCMonthlyRatesConverter.from_files(args.xml_paths)
    return HMRCMonthlyRatesConverter()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.WARNING)
    on = getattr(args, "on", None) or date.today()
    try:
        converter = _build_converter(args)
        if args.command == "convert":
            print(converter.convert_amount(args.value, args.currency, on))
        elif args.command == "rates":
            period = converter.rates_for(on)
            for currency in sorted(period.rates):
                print(f"{currency} {period.rates[currency]}")
        else:
            for start in converter.periods():
                print(start.isoformat())
    except (ConversionError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
