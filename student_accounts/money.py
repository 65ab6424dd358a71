"""
Money Handling Module

Decimal helpers for the single two-decimal-place unit the ledger tracks.
NEVER uses float for monetary values; floats handed in by callers are
converted through their string form first.
"""

from decimal import Decimal, InvalidOperation, getcontext
from typing import Union
import re

# High precision so sums within the balance range stay exact
getcontext().prec = 28

DECIMAL_PLACES = 2
CENT = Decimal('0.01')

AmountLike = Union[Decimal, int, float, str]

_AMOUNT_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal without rounding it

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal with exactly the digits the caller supplied

    Raises:
        TypeError: If value is a bool or an unsupported type
        ValueError: If a string cannot be read as a number
    """
    if isinstance(value, bool):
        raise TypeError("Amount must be numeric, not bool")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Cannot convert '{value}' to Decimal") from None
    raise TypeError(f"Unsupported amount type: {type(value).__name__}")


def fractional_digits(value: Decimal) -> int:
    """Count significant digits after the decimal point (trailing zeros ignored)"""
    _, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int) or exponent >= 0 or value.is_zero():
        return 0

    digits = list(digits)
    while exponent < 0 and digits and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return max(0, -exponent)


def has_valid_precision(value: Decimal, places: int = DECIMAL_PLACES) -> bool:
    """Check that value has at most `places` fractional digits"""
    return fractional_digits(value) <= places


def quantize_cents(value: Decimal) -> Decimal:
    """Pin an already-valid amount to exactly two fractional digits"""
    return value.quantize(CENT)


def format_amount(value: Decimal) -> str:
    """Format for display: exactly two fractional digits, no grouping"""
    return f"{value:.{DECIMAL_PLACES}f}"


def decimal_from_string(value: str) -> Decimal:
    """
    Parse free-text amount input into a Decimal

    Accepts an optional leading dollar sign and comma thousands separators,
    e.g. "$1,250.50".

    Args:
        value: Text typed by the user

    Returns:
        Decimal value

    Raises:
        ValueError: If the text is empty, not a number, or not finite
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    clean_value = value.strip()
    if clean_value.startswith('$'):
        clean_value = clean_value[1:]
    clean_value = clean_value.replace(',', '')

    if not _AMOUNT_PATTERN.match(clean_value):
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    return Decimal(clean_value)
