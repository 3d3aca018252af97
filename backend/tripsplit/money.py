"""Money helpers: decimals at the boundary, integer cents inside."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Numeric = Union[int, float, str, Decimal]

MONEY_PLACES = Decimal("0.01")
CENTS_PER_UNIT = 100


def to_decimal(value: Numeric) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def money(value: Numeric) -> Decimal:
    """Round to two decimal places, half up."""
    return to_decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def to_cents(value: Numeric) -> int:
    """Convert a currency amount to integer minor units."""
    return int((money(value) * CENTS_PER_UNIT).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(units: int) -> Decimal:
    """Convert integer minor units back to a 2-dp decimal."""
    return (Decimal(units) / CENTS_PER_UNIT).quantize(MONEY_PLACES)
