#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All ledger arithmetic happens on integer minor units (cents) so that summing
many small values never drifts. Raw values arriving from the document store
(floats, strings, Decimals) are converted exactly once, here.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert through Decimal, then keep integers
- Warn (PrecisionWarning) when a conversion discards sub-cent precision
"""

import warnings
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

from .exceptions import PrecisionWarning, ValidationError

CENT = Decimal("0.01")

RawAmount = Union[int, float, str, Decimal]


def to_decimal(value: RawAmount) -> Decimal:
    """
    Convert a raw amount to Decimal without binary floating-point artifacts.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than Decimal("0.1000000000000000055511151231257827...").

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValidationError(f"Not a monetary amount: {value!r}")
    try:
        if isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.replace("$", "").replace(",", "").strip())
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValidationError(f"Not a monetary amount: {value!r}") from e

    if not result.is_finite():
        raise ValidationError(f"Not a finite monetary amount: {value!r}")
    return result


def value_to_cents(value: RawAmount, tolerance_cents: int = 0) -> int:
    """
    Convert a raw amount in major units to integer cents.

    Sub-cent digits are rounded half-even. When the discarded part exceeds
    `tolerance_cents` a PrecisionWarning is emitted; the conversion still
    succeeds.

    Args:
        value: Amount like 12.34, "12.34", "$1,234.56" or Decimal("0.10")
        tolerance_cents: Discarded precision (in cents) accepted silently

    Returns:
        Amount in cents

    Examples:
        value_to_cents("45.99") -> 4599
        value_to_cents(0.1) -> 10
    """
    exact = to_decimal(value) * 100
    rounded = exact.quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
    discarded = abs(exact - rounded)
    if discarded > tolerance_cents:
        warnings.warn(
            f"Amount {value!r} rounded to {rounded} cents, discarding {discarded} cents",
            PrecisionWarning,
            stacklevel=2,
        )
    return int(rounded)


def cents_to_decimal(cents: int) -> Decimal:
    """Convert cents to a Decimal amount in major units (4599 -> Decimal('45.99'))."""
    return (Decimal(cents) / 100).quantize(CENT)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a plain amount string using integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    whole = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{whole}.{remainder:02d}"
    return f"{whole}.{remainder:02d}"


def format_cents(cents: int) -> str:
    """Format cents as a display string with $ prefix (sign after the symbol)."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"


def safe_ratio(numerator: int, denominator: int) -> float:
    """Ratio of two cent amounts, 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
