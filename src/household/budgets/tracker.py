#!/usr/bin/env python3
"""
Budget and Goal Progress Tracking

Computes progress for monthly budgets against ledger entries and for savings
goals against the amount saved so far. Nothing is cached: every call reads
the entries it is given.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from ..core.currency import safe_ratio
from ..core.dates import as_datetime, month_key, month_range
from ..core.models import EntryType, MonetaryEntry
from ..core.money import Money
from .models import Budget, MonthlyBudget, SavingsGoal

logger = logging.getLogger(__name__)

DEFAULT_WARNING_THRESHOLD = Decimal("0.85")


class BudgetStatus(Enum):
    """Display status of a budget or goal."""

    ON_TRACK = "on_track"
    WARNING = "warning"
    OVER_BUDGET = "over_budget"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    MISSED = "missed"


@dataclass(frozen=True)
class BudgetProgress:
    """
    Progress of one budget or goal at a given instant.

    `ratio` is unclamped (a monthly budget at 1.25 is 25% over); `display_ratio`
    is clamped to [0, 1] for progress bars. `current` is spending for monthly
    budgets and the amount saved for goals.
    """

    budget: Budget
    current: Money
    target: Money
    ratio: float
    display_ratio: float
    remaining: Money
    status: BudgetStatus
    over_budget: bool = False
    missed: bool = False


def _clamp(ratio: float) -> float:
    return min(max(ratio, 0.0), 1.0)


def monthly_spending(budget: MonthlyBudget, entries: Iterable[MonetaryEntry]) -> Money:
    """Expenses in the budget's categories within its month."""
    window = month_range(budget.month_year)
    categories = set(budget.categories)
    cents = 0
    for entry in entries:
        if entry.type is EntryType.EXPENSE and entry.category in categories and window.contains(entry.date):
            cents += entry.value.cents
    return Money.from_cents(cents)


def _track_monthly(
    budget: MonthlyBudget, entries: Iterable[MonetaryEntry], warning_threshold: Decimal
) -> BudgetProgress:
    spent = monthly_spending(budget, entries)
    ratio = safe_ratio(spent.cents, budget.target_amount.cents)

    if ratio > 1:
        status = BudgetStatus.OVER_BUDGET
    elif ratio > float(warning_threshold):
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.ON_TRACK

    return BudgetProgress(
        budget=budget,
        current=spent,
        target=budget.target_amount,
        ratio=ratio,
        display_ratio=_clamp(ratio),
        remaining=budget.target_amount - spent,
        status=status,
        over_budget=ratio > 1,
    )


def _track_goal(goal: SavingsGoal, now: datetime) -> BudgetProgress:
    ratio = safe_ratio(goal.amount_saved.cents, goal.target_amount.cents)
    missed = goal.target_date is not None and goal.target_date < now and ratio < 1

    if ratio >= 1:
        status = BudgetStatus.COMPLETE
    elif missed:
        status = BudgetStatus.MISSED
    else:
        status = BudgetStatus.IN_PROGRESS

    return BudgetProgress(
        budget=goal,
        current=goal.amount_saved,
        target=goal.target_amount,
        ratio=ratio,
        display_ratio=_clamp(ratio),
        remaining=goal.target_amount - goal.amount_saved,
        status=status,
        missed=missed,
    )


def track_budget(
    budget: Budget,
    entries: Iterable[MonetaryEntry],
    now: date | datetime,
    warning_threshold: Decimal = DEFAULT_WARNING_THRESHOLD,
) -> BudgetProgress:
    """
    Progress of a single budget or goal.

    Args:
        budget: MonthlyBudget or SavingsGoal
        entries: Snapshot of realized entries (ignored for goals)
        now: Current instant, used for goal deadlines
        warning_threshold: Ratio above which a monthly budget is a warning

    Returns:
        BudgetProgress for the budget
    """
    if isinstance(budget, MonthlyBudget):
        return _track_monthly(budget, entries, warning_threshold)
    return _track_goal(budget, as_datetime(now))


def track_budgets(
    budgets: Iterable[Budget],
    entries: Iterable[MonetaryEntry],
    now: date | datetime,
    month: str | None = None,
    warning_threshold: Decimal = DEFAULT_WARNING_THRESHOLD,
) -> list[BudgetProgress]:
    """
    Progress of the monthly budgets for `month` (default: the month of `now`)
    plus every savings goal, ordered by name.
    """
    shown_month = month or month_key(now)
    snapshot = list(entries)

    progress = []
    for budget in budgets:
        if isinstance(budget, MonthlyBudget) and budget.month_year != shown_month:
            continue
        progress.append(track_budget(budget, snapshot, now, warning_threshold))

    over = [p.budget.name for p in progress if p.over_budget]
    if over:
        logger.info(f"{len(over)} budget(s) over target in {shown_month}: {', '.join(over)}")

    return sorted(progress, key=lambda p: (p.budget.name.lower(), p.budget.id))


def contribute(goal: SavingsGoal, amount: Money) -> SavingsGoal:
    """Return the goal with `amount` added to what has been saved."""
    return goal.contribute(amount)
