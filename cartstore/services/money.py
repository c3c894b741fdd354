"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal, None]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for integer currencies (JPY, KRW)
INTEGER_PRECISION = Decimal("1")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
}

INTEGER_CURRENCIES = frozenset({"JPY", "KRW"})

ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")

    try:
        # Floats go through str so 0.3 stays 0.3
        if isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def round_money(value: Number, to_int: bool = False) -> Decimal:
    """
    Round monetary value to appropriate precision.

    Args:
        value: Value to round
        to_int: If True, round to integer (for JPY, KRW)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, JPY, ...)

    Returns:
        Formatted string with currency symbol
    """
    decimal_value = to_decimal(value)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    if currency in INTEGER_CURRENCIES:
        formatted = f"{int(round_money(decimal_value, to_int=True)):,}"
    else:
        formatted = f"{round_money(decimal_value):,.2f}"

    if currency in CURRENCY_SYMBOLS:
        if formatted.startswith("-"):
            return f"-{symbol}{formatted[1:]}"
        return f"{symbol}{formatted}"
    return f"{formatted} {symbol}"


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def compare(a: Number, b: Number) -> int:
    """
    Compare two monetary values.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    diff = to_decimal(a) - to_decimal(b)
    if diff < 0:
        return -1
    elif diff > 0:
        return 1
    return 0
