#!/usr/bin/env python3
"""
Recurring Obligation Domain Models

Scheduled bills and income that have not been realized yet. Every occurrence
of an obligation is computed from its schedule anchor, so clamping a long
month (Jan 31 -> Feb 28) never shifts the rest of the series.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from ..core.dates import add_months, add_years, as_datetime, parse_instant
from ..core.exceptions import ValidationError
from ..core.models import EntryType
from ..core.money import Money


class Frequency(Enum):
    """Calendar unit an obligation repeats on."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: "str | Frequency") -> "Frequency":
        """Parse a frequency tag; unknown tags are rejected, never coerced."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise ValidationError(f"Unknown frequency: {value!r}") from e

    def add(self, start: datetime, units: int, day: int | None = None) -> datetime:
        """
        Add `units` of this frequency to an instant.

        Args:
            start: Instant to add to
            units: Number of days/weeks/months/years
            day: Day-of-month to aim for in monthly/yearly arithmetic;
                clamped to the length of the target month

        Returns:
            The shifted instant
        """
        if self is Frequency.DAILY:
            return start + timedelta(days=units)
        if self is Frequency.WEEKLY:
            return start + timedelta(weeks=units)
        if self is Frequency.MONTHLY:
            return add_months(start, units, day=day)
        return add_years(start, units, day=day)

    def periods_between(self, start: datetime, end: datetime) -> int:
        """Whole units of this frequency from `start` to `end`, rounded down (never negative)."""
        if end <= start:
            return 0
        if self is Frequency.DAILY:
            return (end - start).days
        if self is Frequency.WEEKLY:
            return (end - start).days // 7
        months = (end.year - start.year) * 12 + (end.month - start.month)
        if self is Frequency.MONTHLY:
            return max(months, 0)
        return max(months // 12, 0)


class ObligationState(Enum):
    """Where an obligation sits relative to a reference instant."""

    ACTIVE_PENDING = "active_pending"
    ACTIVE_OVERDUE = "active_overdue"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class RecurringObligation:
    """
    A recurring, scheduled income or expense.

    `next_due_date` is the earliest instant the obligation is next expected
    to post. It only moves forward, and only while `is_active` is true.
    `anchor_date` is the schedule origin all occurrences derive from; it
    defaults to the initial `next_due_date`.
    """

    id: str
    name: str
    amount: Money
    type: EntryType
    category: str
    frequency: Frequency
    interval: int
    next_due_date: datetime
    is_active: bool = True
    notes: str | None = None
    anchor_date: datetime | None = None
    end_date: datetime | None = None
    group_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Money.from_value(self.amount))
        object.__setattr__(self, "type", EntryType.parse(self.type))
        object.__setattr__(self, "frequency", Frequency.parse(self.frequency))
        object.__setattr__(self, "next_due_date", as_datetime(self.next_due_date))
        if self.anchor_date is None:
            object.__setattr__(self, "anchor_date", self.next_due_date)
        else:
            object.__setattr__(self, "anchor_date", as_datetime(self.anchor_date))
        if self.end_date is not None:
            object.__setattr__(self, "end_date", as_datetime(self.end_date))

        if isinstance(self.interval, bool) or not isinstance(self.interval, int) or self.interval < 1:
            raise ValidationError(f"Obligation {self.id}: interval must be a positive integer, got {self.interval!r}")
        if self.amount.is_negative():
            raise ValidationError(f"Obligation {self.id}: amount must be non-negative, got {self.amount}")
        if not self.name:
            raise ValidationError(f"Obligation {self.id}: name is required")
        if self.anchor_date > self.next_due_date:
            raise ValidationError(
                f"Obligation {self.id}: anchor {self.anchor_date} is after next due date {self.next_due_date}"
            )

    def occurrence(self, index: int) -> datetime:
        """The `index`-th occurrence of the schedule (0 is the anchor)."""
        anchor = self.anchor_date or self.next_due_date
        return self.frequency.add(anchor, index * self.interval, day=anchor.day)

    def with_changes(self, **changes: Any) -> "RecurringObligation":
        """Copy with fields replaced; validation runs again."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
            "type": self.type.value,
            "category": self.category,
            "frequency": self.frequency.value,
            "interval": self.interval,
            "nextDueDate": self.next_due_date.isoformat(),
            "isActive": self.is_active,
            "notes": self.notes,
            "anchorDate": self.anchor_date.isoformat() if self.anchor_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "groupId": self.group_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tolerance_cents: int = 0) -> "RecurringObligation":
        """
        Create RecurringObligation from a stored record.

        Bill reminders in the store carry `value`/`dueDate` instead of
        `amount`/`nextDueDate`; both spellings are accepted.

        Raises:
            ValidationError: If required fields are missing or malformed
        """
        try:
            raw_amount = data["amount"] if "amount" in data else data["value"]
            raw_due = data["nextDueDate"] if "nextDueDate" in data else data.get("next_due_date", data.get("dueDate"))
            if raw_due is None:
                raise KeyError("nextDueDate")
            anchor = data.get("anchorDate", data.get("anchor_date"))
            end = data.get("endDate", data.get("end_date"))
            return cls(
                id=str(data["id"]),
                name=data["name"],
                amount=Money.from_value(raw_amount, tolerance_cents),
                type=EntryType.parse(data.get("type", "expense")),
                category=data.get("category", ""),
                frequency=Frequency.parse(data["frequency"]),
                interval=data.get("interval", 1),
                next_due_date=parse_instant(raw_due),
                is_active=data.get("isActive", data.get("is_active", True)),
                notes=data.get("notes"),
                anchor_date=parse_instant(anchor) if anchor else None,
                end_date=parse_instant(end) if end else None,
                group_id=data.get("groupId", data.get("group_id", "")),
            )
        except KeyError as e:
            raise ValidationError(f"Recurring record {data.get('id', '?')} is missing field {e}") from e
