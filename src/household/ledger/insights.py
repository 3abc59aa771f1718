#!/usr/bin/env python3
"""
Spending Insights

Period-over-period comparisons built on the aggregator: category breakdowns,
spending change between two periods, a linear month-end forecast and the
weekday/weekend split.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from ..core.dates import days_in_month
from ..core.models import EntryType, MonetaryEntry
from ..core.money import Money, sum_money

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class CategoryShare:
    """A category's spending and its rounded share of total expenses."""

    category: str
    total: Money
    percentage: int


@dataclass(frozen=True)
class SpendingChange:
    """
    Spending in one category compared across two periods.

    `change_percent` is None when both periods are zero, and math.inf when
    the category is new (nothing spent in the previous period).
    """

    category: str
    current: Money
    previous: Money
    change_amount: Money
    change_percent: float | None


@dataclass(frozen=True)
class TemporalTrends:
    """How expenses spread over the days of the week."""

    spending_by_weekday: dict[str, Money]
    busiest_day: str | None
    busiest_day_total: Money
    weekend_spending: Money
    weekday_spending: Money
    weekend_percentage: int
    weekday_percentage: int


def _rounded_percent(part_cents: int, whole_cents: int) -> int:
    """Share of `whole` as a whole percentage, rounded half up."""
    if whole_cents <= 0:
        return 0
    return int((part_cents * 200 + whole_cents) // (whole_cents * 2))


def category_breakdown(spending: dict[str, Money]) -> list[CategoryShare]:
    """Categories ordered by spending, each with its share of the total."""
    total = sum_money(spending.values()).cents
    shares = [
        CategoryShare(category=category, total=amount, percentage=_rounded_percent(amount.cents, total))
        for category, amount in spending.items()
    ]
    return sorted(shares, key=lambda share: (-share.total.cents, share.category))


def spending_change_percent(current: Money, previous: Money) -> float | None:
    """
    Percentage change of total expenses between two periods.

    Returns:
        0 when both are zero, math.inf when spending appears from nothing,
        -100 when it drops to zero, otherwise the rounded percentage
    """
    if previous.cents == 0:
        return math.inf if current.cents > 0 else 0
    if current.cents == 0:
        return -100
    return round((current.cents - previous.cents) * 100 / previous.cents)


def compare_spending(current: dict[str, Money], previous: dict[str, Money]) -> list[SpendingChange]:
    """
    Category-by-category spending change between two periods.

    Ordering: increases first (largest first), then decreases (largest drop
    first). Categories with no spending in either period are left out.
    """
    changes: list[SpendingChange] = []
    for category in set(current) | set(previous):
        now_spent = current.get(category, Money.zero())
        before = previous.get(category, Money.zero())
        if now_spent.cents == 0 and before.cents == 0:
            continue

        delta = now_spent - before
        percent: float | None
        if before.cents != 0:
            percent = round(delta.cents * 100 / before.cents)
        elif now_spent.cents > 0:
            percent = math.inf
        else:
            percent = None

        changes.append(
            SpendingChange(
                category=category,
                current=now_spent,
                previous=before,
                change_amount=delta,
                change_percent=percent,
            )
        )

    increases = sorted((c for c in changes if c.change_amount.cents > 0), key=lambda c: (-c.change_amount.cents, c.category))
    others = sorted((c for c in changes if c.change_amount.cents <= 0), key=lambda c: (c.change_amount.cents, c.category))
    return increases + others


def top_increase(changes: Iterable[SpendingChange]) -> SpendingChange | None:
    """The category with the largest absolute spending increase, if any increased."""
    increases = [c for c in changes if c.change_amount.cents > 0]
    if not increases:
        return None
    return max(increases, key=lambda c: c.change_amount.cents)


def forecast_month_expenses(month_expenses: Money, now: datetime) -> Money | None:
    """
    Linear projection of this month's spending to month end.

    Args:
        month_expenses: Expenses so far in the month containing `now`
        now: The current instant

    Returns:
        Projected total, or None when nothing has been spent yet
    """
    if month_expenses.cents <= 0:
        return None
    day = now.day
    length = days_in_month(now.year, now.month)
    if day >= length:
        return month_expenses
    projected = (month_expenses.cents * length * 2 + day) // (day * 2)
    return Money.from_cents(projected)


def temporal_trends(entries: Iterable[MonetaryEntry]) -> TemporalTrends:
    """Split expenses by weekday and weekend (Saturday and Sunday)."""
    by_day = [0] * 7
    for entry in entries:
        if entry.type is EntryType.EXPENSE:
            by_day[entry.date.weekday()] += entry.value.cents

    weekend = by_day[5] + by_day[6]
    weekday = sum(by_day[:5])
    total = weekend + weekday

    busiest_index = max(range(7), key=lambda i: by_day[i]) if total > 0 else None
    return TemporalTrends(
        spending_by_weekday={WEEKDAY_NAMES[i]: Money.from_cents(by_day[i]) for i in range(7)},
        busiest_day=WEEKDAY_NAMES[busiest_index] if busiest_index is not None else None,
        busiest_day_total=Money.from_cents(by_day[busiest_index]) if busiest_index is not None else Money.zero(),
        weekend_spending=Money.from_cents(weekend),
        weekday_spending=Money.from_cents(weekday),
        weekend_percentage=_rounded_percent(weekend, total),
        weekday_percentage=_rounded_percent(weekday, total),
    )
