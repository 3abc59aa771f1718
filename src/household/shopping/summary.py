#!/usr/bin/env python3
"""
Shopping List Summary

Progress and value totals for a shopping list, recomputed from the items on
every call.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.currency import safe_ratio
from ..core.money import Money
from .models import ShoppingItem


@dataclass(frozen=True)
class ShoppingListSummary:
    """
    Totals for one shopping list.

    `percentage_bought` is the bought/total ratio in [0, 1] (0 for an empty
    list); `percent_display` is the same as a rounded whole percentage.
    """

    item_count: int
    bought_count: int
    percentage_bought: float
    total_estimated_value: Money
    total_bought_value: Money

    @property
    def percent_display(self) -> int:
        return int((self.bought_count * 200 + self.item_count) // (self.item_count * 2)) if self.item_count else 0

    @property
    def remaining_value(self) -> Money:
        return self.total_estimated_value - self.total_bought_value


def summarize_list(items: Iterable[ShoppingItem]) -> ShoppingListSummary:
    """
    Summarize a shopping list.

    Items without an estimated value count as zero in the value totals.
    """
    total = 0
    bought = 0
    estimated_cents = 0
    bought_cents = 0
    for item in items:
        total += 1
        value = item.estimated_value.cents if item.estimated_value is not None else 0
        estimated_cents += value
        if item.is_bought:
            bought += 1
            bought_cents += value

    return ShoppingListSummary(
        item_count=total,
        bought_count=bought,
        percentage_bought=safe_ratio(bought, total),
        total_estimated_value=Money.from_cents(estimated_cents),
        total_bought_value=Money.from_cents(bought_cents),
    )
