from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without picking up binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_half_away(value: Number, digits: int = 0) -> Decimal:
    """
    Round to the given number of fractional digits, ties away from zero.

    Decimal's ROUND_HALF_UP rounds halves away from zero for both signs,
    so 2.5 -> 3 and -2.5 -> -3.
    """
    exponent = Decimal(1).scaleb(-digits)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def round_to_int(value: Number) -> int:
    """Round half away from zero to an integer."""
    return int(round_half_away(value, 0))


def percent_of(amount: Number, percentage: Number) -> int:
    """amount * percentage / 100, rounded to whole currency units."""
    return round_to_int(to_decimal(amount) * to_decimal(percentage) / 100)


def ratio_percent(numerator: Number, denominator: Number) -> int:
    """numerator / denominator * 100, rounded. Caller guards the denominator."""
    return round_to_int(to_decimal(numerator) * 100 / to_decimal(denominator))
