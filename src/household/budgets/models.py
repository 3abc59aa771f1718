#!/usr/bin/env python3
"""
Budget and Savings Goal Domain Models

A budget is one of two kinds, each carrying only its own fields:

- MonthlyBudget: a spending cap on some categories for one "YYYY-MM" month
- SavingsGoal: a target amount to put aside, optionally by a date

`budget_from_dict` maps stored records (one flat document with a `type`
discriminant) onto the right kind and rejects records mixing both.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Union

from ..core.dates import as_datetime, parse_instant, parse_month_key
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.money import Money


class BudgetKind(Enum):
    """Discriminant of stored budget records."""

    MONTHLY = "monthly"
    GOAL = "goal"


def _require_positive_target(budget_id: str, target: Money) -> None:
    if target.cents <= 0:
        raise ValidationError(f"Budget {budget_id}: target amount must be positive, got {target}")


@dataclass(frozen=True)
class MonthlyBudget:
    """Spending cap for a set of categories in one month."""

    id: str
    name: str
    target_amount: Money
    categories: tuple[str, ...]
    month_year: str
    created_by: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_amount", Money.from_value(self.target_amount))
        if isinstance(self.categories, str):
            object.__setattr__(self, "categories", (self.categories,))
        else:
            object.__setattr__(self, "categories", tuple(c for c in self.categories if c))

        _require_positive_target(self.id, self.target_amount)
        if not self.categories:
            raise ConfigurationError(f"Monthly budget {self.id} needs at least one category")
        if not self.month_year:
            raise ConfigurationError(f"Monthly budget {self.id} needs a month (YYYY-MM)")
        try:
            parse_month_key(self.month_year)
        except ValidationError as e:
            raise ConfigurationError(f"Monthly budget {self.id}: {e}") from e

    @property
    def kind(self) -> BudgetKind:
        return BudgetKind.MONTHLY

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.kind.value,
            "targetAmount": str(self.target_amount.to_decimal()),
            "categories": list(self.categories),
            "monthYear": self.month_year,
            "createdBy": self.created_by,
        }


@dataclass(frozen=True)
class SavingsGoal:
    """Amount to save, with an optional deadline."""

    id: str
    name: str
    target_amount: Money
    amount_saved: Money = Money(cents=0)
    target_date: datetime | None = None
    created_by: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_amount", Money.from_value(self.target_amount))
        object.__setattr__(self, "amount_saved", Money.from_value(self.amount_saved))
        if self.target_date is not None:
            object.__setattr__(self, "target_date", as_datetime(self.target_date))

        _require_positive_target(self.id, self.target_amount)
        if self.amount_saved.is_negative():
            raise ConfigurationError(f"Savings goal {self.id}: amount saved must be non-negative")

    @property
    def kind(self) -> BudgetKind:
        return BudgetKind.GOAL

    def contribute(self, amount: Money) -> "SavingsGoal":
        """
        Add money to the goal.

        Raises:
            ValidationError: If the contribution is not positive
        """
        amount = Money.from_value(amount)
        if amount.cents <= 0:
            raise ValidationError(f"Contribution to {self.id} must be positive, got {amount}")
        return replace(self, amount_saved=self.amount_saved + amount)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.kind.value,
            "targetAmount": str(self.target_amount.to_decimal()),
            "amountSaved": str(self.amount_saved.to_decimal()),
            "targetDate": self.target_date.isoformat() if self.target_date else None,
            "createdBy": self.created_by,
        }


Budget = Union[MonthlyBudget, SavingsGoal]

MONTHLY_ONLY_FIELDS = ("category", "categories", "monthYear")
GOAL_ONLY_FIELDS = ("amountSaved", "targetDate")


def _present(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    return value is not None and value != "" and value != []


def budget_from_dict(data: dict[str, Any], tolerance_cents: int = 0) -> Budget:
    """
    Build a MonthlyBudget or SavingsGoal from a stored record.

    Raises:
        ConfigurationError: If the type is missing/unknown, a kind's required
            fields are missing, or the record carries the other kind's fields
        ValidationError: If the target amount is not positive
    """
    budget_id = str(data.get("id", "?"))
    raw_type = data.get("type")
    try:
        kind = BudgetKind(raw_type)
    except ValueError as e:
        raise ConfigurationError(f"Budget {budget_id}: unknown or missing type {raw_type!r}") from e

    if "targetAmount" not in data:
        raise ValidationError(f"Budget {budget_id}: targetAmount is required")

    if kind is BudgetKind.MONTHLY:
        stray = [key for key in GOAL_ONLY_FIELDS if _present(data, key)]
        if stray:
            raise ConfigurationError(f"Monthly budget {budget_id} carries goal fields: {', '.join(stray)}")
        categories = data.get("categories") or ([data["category"]] if _present(data, "category") else [])
        return MonthlyBudget(
            id=budget_id,
            name=data.get("name", ""),
            target_amount=Money.from_value(data["targetAmount"], tolerance_cents),
            categories=tuple(categories),
            month_year=data.get("monthYear", ""),
            created_by=data.get("createdBy"),
        )

    stray = [key for key in MONTHLY_ONLY_FIELDS if _present(data, key)]
    if stray:
        raise ConfigurationError(f"Savings goal {budget_id} carries monthly fields: {', '.join(stray)}")
    target_date = data.get("targetDate")
    return SavingsGoal(
        id=budget_id,
        name=data.get("name", ""),
        target_amount=Money.from_value(data["targetAmount"], tolerance_cents),
        amount_saved=Money.from_value(data.get("amountSaved", 0), tolerance_cents),
        target_date=parse_instant(target_date) if target_date else None,
        created_by=data.get("createdBy"),
    )
