#!/usr/bin/env python3
"""
Shopping List Domain Models

Items on a shared shopping list. `estimated_value` is the expected cost of the
whole line (all of `quantity`), so list totals are plain sums.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from ..core.currency import to_decimal
from ..core.dates import as_datetime, parse_instant
from ..core.exceptions import ValidationError
from ..core.money import Money


def _quantity(value: Any, owner: str) -> Decimal:
    quantity = to_decimal(value)
    if quantity <= 0:
        raise ValidationError(f"{owner}: quantity must be positive, got {quantity}")
    return quantity


@dataclass(frozen=True)
class ShoppingItem:
    """One line of a shopping list."""

    id: str
    name: str
    quantity: Decimal = Decimal("1")
    unit: str = "un"
    estimated_value: Money | None = None
    is_bought: bool = False
    bought_at: datetime | None = None
    bought_by: str | None = None
    category: str | None = None
    store: str | None = None
    added_by: str | None = None
    added_at: datetime | None = None
    linked_entry_id: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError(f"Shopping item {self.id} needs a name")
        object.__setattr__(self, "quantity", _quantity(self.quantity, f"Shopping item {self.id}"))
        if self.estimated_value is not None:
            value = Money.from_value(self.estimated_value)
            if value.is_negative():
                raise ValidationError(f"Shopping item {self.id}: estimated value must be non-negative")
            object.__setattr__(self, "estimated_value", value)
        if self.bought_at is not None:
            object.__setattr__(self, "bought_at", as_datetime(self.bought_at))
        if self.added_at is not None:
            object.__setattr__(self, "added_at", as_datetime(self.added_at))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": str(self.quantity),
            "unit": self.unit,
            "estimatedValue": str(self.estimated_value.to_decimal()) if self.estimated_value else None,
            "isBought": self.is_bought,
            "boughtAt": self.bought_at.isoformat() if self.bought_at else None,
            "boughtBy": self.bought_by,
            "category": self.category,
            "store": self.store,
            "addedBy": self.added_by,
            "addedAt": self.added_at.isoformat() if self.added_at else None,
            "linkedTransactionId": self.linked_entry_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tolerance_cents: int = 0) -> "ShoppingItem":
        """Create from a stored record (camelCase keys)."""
        try:
            estimated = data.get("estimatedValue")
            bought_at = data.get("boughtAt")
            added_at = data.get("addedAt")
            return cls(
                id=str(data["id"]),
                name=data["name"],
                quantity=data.get("quantity", 1),
                unit=data.get("unit", "un"),
                estimated_value=Money.from_value(estimated, tolerance_cents) if estimated is not None else None,
                is_bought=bool(data.get("isBought", False)),
                bought_at=parse_instant(bought_at) if bought_at else None,
                bought_by=data.get("boughtBy"),
                category=data.get("category"),
                store=data.get("store"),
                added_by=data.get("addedBy"),
                added_at=parse_instant(added_at) if added_at else None,
                linked_entry_id=data.get("linkedTransactionId"),
            )
        except KeyError as e:
            raise ValidationError(f"Shopping item record missing field {e}") from e


def mark_bought(item: ShoppingItem, by: str, at: date | datetime) -> ShoppingItem:
    """Item checked off by `by` at `at`."""
    return replace(item, is_bought=True, bought_by=by, bought_at=as_datetime(at))


def unmark_bought(item: ShoppingItem) -> ShoppingItem:
    """Item back on the list, with purchase details and entry link cleared."""
    return replace(item, is_bought=False, bought_by=None, bought_at=None, linked_entry_id=None)


def display_order(items: list[ShoppingItem]) -> list[ShoppingItem]:
    """Items still to buy first, then most recently added first within each group."""
    return sorted(
        items,
        key=lambda item: (item.is_bought, -(item.added_at.timestamp() if item.added_at else 0.0)),
    )
