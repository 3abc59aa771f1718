#!/usr/bin/env python3
"""
Money Primitive Type

Immutable, currency-agnostic amount wrapper that uses integer cents internally.
Prevents floating-point drift when many small household amounts are summed.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from .currency import RawAmount, cents_to_decimal, format_cents, value_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Ledger values are never negative (the entry type carries the sign), but
    derived values such as a balance or a remaining budget can be.

    Examples:
        >>> groceries = Money.from_value("45.99")
        >>> str(groceries)
        '$45.99'

        >>> rent = Money.from_cents(120000)
        >>> str(groceries - rent)
        '-$1154.01'

        >>> sum_money([Money.from_value(0.1)] * 10)
        Money(cents=100)
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_value(cls, value: "RawAmount | Money", tolerance_cents: int = 0) -> "Money":
        """
        Create Money from an amount in major units.

        Accepts ints, floats, strings and Decimals as they come out of the
        document store. Emits PrecisionWarning when sub-cent digits beyond
        `tolerance_cents` are discarded.

        Args:
            value: Amount like 12.34, "12.34" or Decimal("12.34")
            tolerance_cents: Discarded precision accepted without a warning

        Returns:
            Money object
        """
        if isinstance(value, Money):
            return value
        return cls(cents=value_to_cents(value, tolerance_cents))

    @classmethod
    def zero(cls) -> "Money":
        """The additive identity."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value in major units as a two-place Decimal."""
        return cents_to_decimal(self.cents)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def is_negative(self) -> bool:
        """Check whether the amount is below zero."""
        return self.cents < 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"


def sum_money(amounts: Iterable[Money]) -> Money:
    """Sum Money values with integer accumulation; empty input sums to zero."""
    return Money(cents=sum(amount.cents for amount in amounts))
