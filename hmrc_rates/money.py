"""Decimal helpers and the ``GBP`` result type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, DecimalException
from typing import Final

from hmrc_rates.errors import ValueParseError

GBP_SYMBOL: Final[str] = "£"
GBP_QUANTUM: Final[Decimal] = Decimal("0.01")
# Matches the 28 significant digits of the reference decimal implementation.
DIVISION_CONTEXT: Final[Context] = Context(prec=28, rounding=ROUND_HALF_EVEN)
AMOUNT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


@dataclass(frozen=True, order=True, slots=True)
class GBP:
    """An amount in pounds sterling, always held to two decimal places."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("GBP amount must be a Decimal")
        # Callers may pass an unrounded quotient; store the money value only.
        object.__setattr__(self, "amount", round_money(self.amount))

    def as_decimal(self) -> Decimal:
        return self.amount

    def __str__(self) -> str:
        return f"{GBP_SYMBOL}{self.amount}"


def round_money(value: Decimal) -> Decimal:
    """Round ``value`` to pence using banker's rounding.

    The context grows with the integer part so large amounts keep every digit.
    """

    context = Context(prec=max(28, value.adjusted() + 3), rounding=ROUND_HALF_EVEN)
    try:
        return value.quantize(GBP_QUANTUM, context=context)
    except DecimalException as exc:
        raise ValueParseError(value) from exc


def parse_amount(value: Decimal | str | int) -> Decimal:
    """Return ``value`` as a finite :class:`Decimal` or raise ``ValueParseError``.

    Floats are refused because they do not carry an exact base-10 value.
    Strings must be plain ASCII numbers such as ``100.00``, ``-3`` or ``1e3``.
    """

    if isinstance(value, bool) or isinstance(value, float):
        raise ValueParseError(value)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            raise ValueParseError(value)
        amount = Decimal(text)
    else:
        raise ValueParseError(value)
    if not amount.is_finite():
        raise ValueParseError(value)
    return amount


def divide(amount: Decimal, rate: Decimal) -> Decimal:
    """Exact decimal ``amount / rate`` within :data:`DIVISION_CONTEXT`."""

    try:
        return DIVISION_CONTEXT.divide(amount, rate)
    except DecimalException as exc:
        raise ValueParseError(amount) from exc


__all__ = [
    "AMOUNT_PATTERN",
    "GBP",
    "GBP_QUANTUM",
    "GBP_SYMBOL",
    "divide",
    "parse_amount",
    "round_money",
]
