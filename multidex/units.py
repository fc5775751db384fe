"""
Decimal <-> base-unit conversion.

Human amounts are Decimals; on-chain amounts are uint256 integers. Converting
to base units rounds half away from zero (ROUND_HALF_UP on a Decimal), never
banker's rounding. All arithmetic runs in a local context wide enough for
uint256 values with 18 fractional digits.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from multidex.exceptions import NumericConversionError

Amount = Union[Decimal, int, float, str]

MAX_UINT256 = 2**256 - 1

# uint256 has 78 digits; 18 more for the fractional part
_PRECISION = 100

FIXED18_QUANTUM = Decimal(1).scaleb(-18)


def to_decimal(amount: Amount) -> Decimal:
    """Coerce an amount to Decimal. Floats go through str() so 0.1 stays 0.1."""
    if isinstance(amount, bool):
        raise NumericConversionError(f"Invalid amount: {amount!r}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        if not math.isfinite(amount):
            raise NumericConversionError(f"Amount is not finite: {amount}")
        value = Decimal(str(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation:
            raise NumericConversionError(f"Invalid amount: {amount!r}") from None
    else:
        raise NumericConversionError(f"Unsupported amount type: {type(amount).__name__}")

    if not value.is_finite():
        raise NumericConversionError(f"Amount is not finite: {amount}")
    return value


def to_base_units(amount: Amount, decimals: int) -> int:
    """
    Convert a human amount into integer base units.

    Args:
        amount: Non-negative amount in the token's human units
        decimals: Token decimal count

    Returns:
        round(amount * 10**decimals) as an int

    Raises:
        NumericConversionError: Negative, non-finite, or larger than uint256
    """
    value = to_decimal(amount)
    if value < 0:
        raise NumericConversionError(f"Amount must not be negative: {value}")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise NumericConversionError(
                f"Amount {value} cannot be represented with {decimals} decimals"
            ) from None

    base_units = int(scaled)
    if base_units > MAX_UINT256:
        raise NumericConversionError(f"Amount {value} exceeds uint256 at {decimals} decimals")
    return base_units


def from_base_units(value: Union[int, Decimal], decimals: int) -> Decimal:
    """Convert base units back to human units (exact scaling, no rounding)."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(value).scaleb(-decimals)


def normalize_fixed18(value: int) -> Decimal:
    """Represent an integer amount as an 18-decimal fixed-point Decimal."""
    if value < 0 or value > MAX_UINT256:
        raise NumericConversionError(f"Value out of uint256 range: {value}")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(value).quantize(FIXED18_QUANTUM)
