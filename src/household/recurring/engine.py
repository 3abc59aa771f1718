#!/usr/bin/env python3
"""
Recurrence Engine

Advances recurring obligations along their schedule and classifies them
against a caller-supplied instant. Every function here is pure: the current
instant is always passed in, never read from a clock.

Honoring policy:
- One realized entry per honoring action, dated at the due date
- Periods missed while the household was away are skipped, not back-filled
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..core.dates import DateRange, as_datetime, end_of_day, start_of_day
from ..core.exceptions import ValidationError
from ..core.models import EntryType, MonetaryEntry
from ..core.money import Money, sum_money
from .models import ObligationState, RecurringObligation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Honoring:
    """Result of honoring an obligation: the realized entry and the advanced obligation."""

    entry: MonetaryEntry
    obligation: RecurringObligation
    previous_due_date: datetime
    skipped_periods: int = 0


@dataclass(frozen=True)
class UpcomingSummary:
    """Active obligations falling due within a look-ahead window."""

    window: DateRange
    obligations: list[RecurringObligation] = field(default_factory=list)
    total_expenses: Money = field(default_factory=Money.zero)
    total_income: Money = field(default_factory=Money.zero)

    @property
    def count(self) -> int:
        return len(self.obligations)

    @property
    def next_obligation(self) -> RecurringObligation | None:
        """The obligation due soonest, if any."""
        return self.obligations[0] if self.obligations else None


def _first_occurrence_after(
    obligation: RecurringObligation, floor: datetime, inclusive: bool = False
) -> tuple[datetime, int]:
    """
    Find the first schedule occurrence after `floor`.

    Returns:
        (occurrence, index) where occurrence > floor, or >= floor when inclusive
    """
    anchor = obligation.anchor_date or obligation.next_due_date
    index = max(obligation.frequency.periods_between(anchor, floor) // obligation.interval - 1, 0)
    candidate = obligation.occurrence(index)
    while candidate < floor or (candidate == floor and not inclusive):
        index += 1
        candidate = obligation.occurrence(index)
    return candidate, index


def _index_of(obligation: RecurringObligation, instant: datetime) -> int:
    """Schedule index of the first occurrence at or after `instant`."""
    return _first_occurrence_after(obligation, instant, inclusive=True)[1]


def _finish_if_past_end(obligation: RecurringObligation, candidate: datetime) -> RecurringObligation | None:
    """Deactivate (freezing the due date) when `candidate` falls after the series end."""
    if obligation.end_date is not None and candidate > obligation.end_date:
        logger.info(f"Obligation {obligation.id} ended on {obligation.end_date.date()}, deactivating")
        return obligation.with_changes(is_active=False)
    return None


def advance(obligation: RecurringObligation, reference: datetime) -> RecurringObligation:
    """
    Move an obligation's due date to its next occurrence.

    The new due date is strictly after the current due date, computed from
    the schedule anchor rather than from `reference`. Occurrences at or
    before `reference` are skipped, so an obligation that sat unpaid for
    several periods lands in the future in a single step.

    Args:
        obligation: Obligation to advance
        reference: The current instant

    Returns:
        Advanced obligation. Inactive obligations are returned unchanged.
        An obligation whose next occurrence falls after its end date comes
        back inactive with its due date frozen.
    """
    if not obligation.is_active:
        logger.debug(f"Obligation {obligation.id} is inactive, not advancing")
        return obligation

    floor = max(obligation.next_due_date, as_datetime(reference))
    candidate, _ = _first_occurrence_after(obligation, floor)

    finished = _finish_if_past_end(obligation, candidate)
    if finished is not None:
        return finished

    return obligation.with_changes(next_due_date=candidate)


def classify(obligation: RecurringObligation, now: datetime) -> ObligationState:
    """Classify an obligation as inactive, overdue or pending at `now`."""
    if not obligation.is_active:
        return ObligationState.INACTIVE
    if obligation.next_due_date < as_datetime(now):
        return ObligationState.ACTIVE_OVERDUE
    return ObligationState.ACTIVE_PENDING


def deactivate(obligation: RecurringObligation) -> RecurringObligation:
    """Freeze an obligation; its due date stays where it is."""
    if not obligation.is_active:
        return obligation
    return obligation.with_changes(is_active=False)


def reactivate(obligation: RecurringObligation, now: datetime) -> RecurringObligation:
    """
    Resume a frozen obligation without surfacing a backlog.

    The due date moves to the first occurrence at or after `now`; a frozen
    due date that is still in the future is kept. Calling this twice with
    the same `now` yields the same due date.
    """
    if obligation.is_active:
        return obligation

    now = as_datetime(now)
    if obligation.next_due_date >= now:
        candidate = obligation.next_due_date
    else:
        candidate, _ = _first_occurrence_after(obligation, now, inclusive=True)

    if obligation.end_date is not None and candidate > obligation.end_date:
        logger.warning(f"Obligation {obligation.id} ended on {obligation.end_date.date()}, cannot reactivate")
        return obligation

    return obligation.with_changes(is_active=True, next_due_date=candidate)


def honor(
    obligation: RecurringObligation,
    now: datetime,
    entry_id: str | None = None,
    created_by: str | None = None,
) -> Honoring:
    """
    Realize one monetary entry from an obligation and advance it.

    The entry is dated at the due date being honored. However late the
    honoring is, exactly one entry is produced.

    Raises:
        ValidationError: If the obligation is inactive
    """
    if not obligation.is_active:
        raise ValidationError(f"Obligation {obligation.id} is inactive and cannot be honored")

    due = obligation.next_due_date
    prefix = "Payment" if obligation.type is EntryType.EXPENSE else "Receipt"
    entry = MonetaryEntry(
        id=entry_id or f"{obligation.id}-{due:%Y%m%d}",
        value=obligation.amount,
        type=obligation.type,
        category=obligation.category,
        date=due,
        group_id=obligation.group_id,
        description=f"{prefix}: {obligation.name}",
        created_by=created_by,
    )

    advanced = advance(obligation, as_datetime(now))
    skipped = 0
    if advanced.is_active:
        skipped = max(_index_of(obligation, advanced.next_due_date) - _index_of(obligation, due) - 1, 0)
    if skipped:
        logger.debug(f"Obligation {obligation.id}: skipped {skipped} missed period(s)")

    logger.info(f"Honored obligation {obligation.id} due {due.date()}, next due {advanced.next_due_date.date()}")
    return Honoring(entry=entry, obligation=advanced, previous_due_date=due, skipped_periods=skipped)


def overdue(obligations: Iterable[RecurringObligation], now: datetime) -> list[RecurringObligation]:
    """Active obligations whose due date has passed, oldest first."""
    late = [o for o in obligations if classify(o, now) is ObligationState.ACTIVE_OVERDUE]
    return sorted(late, key=lambda o: o.next_due_date)


def upcoming(obligations: Iterable[RecurringObligation], now: datetime, days_ahead: int = 30) -> UpcomingSummary:
    """
    Active obligations due from the start of today through `days_ahead` days out.

    Inactive obligations never appear. Results are ordered by due date.
    """
    window = DateRange(start=start_of_day(now), end=end_of_day(as_datetime(now) + timedelta(days=days_ahead)))
    due_soon = sorted(
        (o for o in obligations if o.is_active and window.contains(o.next_due_date)),
        key=lambda o: (o.next_due_date, o.name),
    )
    return UpcomingSummary(
        window=window,
        obligations=due_soon,
        total_expenses=sum_money(o.amount for o in due_soon if o.type is EntryType.EXPENSE),
        total_income=sum_money(o.amount for o in due_soon if o.type is EntryType.INCOME),
    )
