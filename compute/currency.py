from typing import Optional

from settings import CurrencyFormat, get_settings
from compute.rounding import Number, round_half_away


def format_currency(amount: Number, fmt: Optional[CurrencyFormat] = None) -> str:
    """
    Format an amount for display, e.g. 300000 -> "￥300,000".

    Args:
        amount: Amount in currency units
        fmt: Display convention (defaults to the configured one)

    Returns:
        Symbol-prefixed string with thousands separators; negatives get a
        leading "-" before the symbol
    """
    fmt = fmt or get_settings().currency_format

    value = round_half_away(amount, fmt.fraction_digits)
    sign = "-" if value < 0 else ""
    body = f"{abs(value):,.{fmt.fraction_digits}f}"

    return f"{sign}{fmt.symbol}{body}"
