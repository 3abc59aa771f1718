#!/usr/bin/env python3
"""
Ledger Aggregator

Folds realized monetary entries into income/expense/balance summaries for an
arbitrary period. Accumulation is integer cents, so the result does not depend
on entry order and summaries of disjoint ranges add up to the summary of
their union.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..core.dates import DateRange, month_range, week_range
from ..core.models import EntryType, MonetaryEntry
from ..core.money import Money


@dataclass(frozen=True)
class FinancialSummary:
    """Income, expenses and balance over a period."""

    income: Money = field(default_factory=Money.zero)
    expenses: Money = field(default_factory=Money.zero)

    @property
    def balance(self) -> Money:
        return self.income - self.expenses

    def __add__(self, other: "FinancialSummary") -> "FinancialSummary":
        """Combine summaries of disjoint periods."""
        return FinancialSummary(income=self.income + other.income, expenses=self.expenses + other.expenses)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary of decimal strings for display or JSON."""
        return {
            "income": str(self.income.to_decimal()),
            "expenses": str(self.expenses.to_decimal()),
            "balance": str(self.balance.to_decimal()),
        }


@dataclass(frozen=True)
class DashboardSummary:
    """The two summary cards of the home screen: current month and current week."""

    month_key: str
    month: FinancialSummary
    week_range: DateRange
    week: FinancialSummary


def _as_range(period: "DateRange | tuple[date | datetime, date | datetime]") -> DateRange:
    if isinstance(period, DateRange):
        return period
    start, end = period
    return DateRange(start=start, end=end)


def entries_in_range(
    entries: Iterable[MonetaryEntry], period: "DateRange | tuple[date | datetime, date | datetime]"
) -> list[MonetaryEntry]:
    """Entries dated within the inclusive range."""
    window = _as_range(period)
    return [entry for entry in entries if window.contains(entry.date)]


def summarize(
    entries: Iterable[MonetaryEntry], period: "DateRange | tuple[date | datetime, date | datetime]"
) -> FinancialSummary:
    """
    Sum income and expenses of entries dated within `period` (bounds inclusive).

    Args:
        entries: Snapshot of realized entries; not modified
        period: DateRange or (start, end) pair

    Returns:
        FinancialSummary; all zero for empty input
    """
    window = _as_range(period)
    income_cents = 0
    expense_cents = 0
    for entry in entries:
        if not window.contains(entry.date):
            continue
        if entry.type is EntryType.INCOME:
            income_cents += entry.value.cents
        else:
            expense_cents += entry.value.cents
    return FinancialSummary(income=Money.from_cents(income_cents), expenses=Money.from_cents(expense_cents))


def summarize_month(entries: Iterable[MonetaryEntry], month: "str | date | datetime") -> FinancialSummary:
    """Summary for a calendar month given as "YYYY-MM" or any instant inside it."""
    return summarize(entries, month_range(month))


def summarize_week(entries: Iterable[MonetaryEntry], day: date | datetime) -> FinancialSummary:
    """Summary for the Monday-to-Sunday week containing `day`."""
    return summarize(entries, week_range(day))


def dashboard(entries: Iterable[MonetaryEntry], now: datetime) -> DashboardSummary:
    """Month-to-date and week summaries around `now`, from a single snapshot."""
    snapshot = list(entries)
    month_window = month_range(now)
    week_window = week_range(now)
    return DashboardSummary(
        month_key=f"{now.year:04d}-{now.month:02d}",
        month=summarize(snapshot, month_window),
        week_range=week_window,
        week=summarize(snapshot, week_window),
    )


def spending_by_category(
    entries: Iterable[MonetaryEntry],
    period: "DateRange | tuple[date | datetime, date | datetime] | None" = None,
) -> dict[str, Money]:
    """
    Expense totals per category, optionally restricted to a period.

    Income entries are ignored. Categories with no spending are absent.
    """
    window = _as_range(period) if period is not None else None
    totals: dict[str, int] = defaultdict(int)
    for entry in entries:
        if entry.type is not EntryType.EXPENSE:
            continue
        if window is not None and not window.contains(entry.date):
            continue
        totals[entry.category] += entry.value.cents
    return {category: Money.from_cents(cents) for category, cents in totals.items()}
