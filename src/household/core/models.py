#!/usr/bin/env python3
"""
Core Data Models for the Household Ledger

The realized transaction record shared by the ledger, the budget tracker and
the recurrence engine (which produces them when an obligation is honored).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .dates import as_datetime, parse_instant
from .exceptions import ValidationError
from .money import Money


class EntryType(Enum):
    """Direction of a monetary entry."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value: "str | EntryType") -> "EntryType":
        """Parse a type tag, rejecting anything outside income/expense."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise ValidationError(f"Unknown entry type: {value!r}") from e


@dataclass(frozen=True)
class MonetaryEntry:
    """
    A realized income or expense belonging to one household group.

    The value is never negative; its sign is implied by `type`.
    Immutable once created.
    """

    id: str
    value: Money
    type: EntryType
    category: str
    date: datetime
    group_id: str = ""
    description: str | None = None
    created_by: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", Money.from_value(self.value))
        object.__setattr__(self, "type", EntryType.parse(self.type))
        object.__setattr__(self, "date", as_datetime(self.date))
        if self.value.is_negative():
            raise ValidationError(f"Entry {self.id} has negative value {self.value}")

    @property
    def is_income(self) -> bool:
        return self.type is EntryType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type is EntryType.EXPENSE

    @property
    def signed_value(self) -> Money:
        """Value with expenses negated, for running balances."""
        return self.value if self.is_income else -self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "value": str(self.value.to_decimal()),
            "type": self.type.value,
            "category": self.category,
            "date": self.date.isoformat(),
            "groupId": self.group_id,
            "description": self.description,
            "userId": self.created_by,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tolerance_cents: int = 0) -> "MonetaryEntry":
        """
        Create MonetaryEntry from a stored record.

        Accepts the document store's camelCase keys (`groupId`, `userId`)
        as well as snake_case.
        """
        return cls(
            id=str(data["id"]),
            value=Money.from_value(data["value"], tolerance_cents),
            type=EntryType.parse(data["type"]),
            category=data.get("category", ""),
            date=parse_instant(data["date"]),
            group_id=data.get("groupId", data.get("group_id", "")),
            description=data.get("description"),
            created_by=data.get("userId", data.get("created_by")),
        )
