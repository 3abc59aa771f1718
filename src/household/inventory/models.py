#!/usr/bin/env python3
"""
Inventory Domain Models

Household stock of recurring purchases with their purchase history. Stored
records that only keep the most recent purchase (lastPurchaseDate,
lastPurchaseQuantity, lastPurchaseValue) load as a one-record history.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from ..core.currency import to_decimal
from ..core.dates import as_datetime, parse_instant
from ..core.exceptions import ValidationError
from ..core.money import Money


@dataclass(frozen=True)
class PurchaseRecord:
    """One purchase of an inventory item. `value` is the total paid, if known."""

    date: datetime
    quantity: Decimal
    value: Money | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", as_datetime(self.date))
        quantity = to_decimal(self.quantity)
        if quantity <= 0:
            raise ValidationError(f"Purchase quantity must be positive, got {quantity}")
        object.__setattr__(self, "quantity", quantity)
        if self.value is not None:
            value = Money.from_value(self.value)
            if value.is_negative():
                raise ValidationError(f"Purchase value must be non-negative, got {value}")
            object.__setattr__(self, "value", value)


@dataclass(frozen=True)
class InventoryItem:
    """An item kept in stock, with purchases ordered oldest first."""

    id: str
    name: str
    quantity: Decimal = Decimal("0")
    unit: str = "un"
    purchases: tuple[PurchaseRecord, ...] = field(default_factory=tuple)
    next_purchase_date: datetime | None = None
    next_purchase_value: Money | None = None
    estimated_value: Money | None = None
    category: str | None = None
    store: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError(f"Inventory item {self.id} needs a name")
        quantity = to_decimal(self.quantity)
        if quantity < 0:
            raise ValidationError(f"Inventory item {self.id}: stock cannot be negative, got {quantity}")
        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "purchases", tuple(sorted(self.purchases, key=lambda p: p.date)))
        if self.next_purchase_date is not None:
            object.__setattr__(self, "next_purchase_date", as_datetime(self.next_purchase_date))
        for name in ("next_purchase_value", "estimated_value"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, Money.from_value(value))

    @property
    def last_purchase(self) -> PurchaseRecord | None:
        return self.purchases[-1] if self.purchases else None

    def to_dict(self) -> dict[str, Any]:
        def amount(value: Money | None) -> str | None:
            return str(value.to_decimal()) if value is not None else None

        return {
            "id": self.id,
            "name": self.name,
            "quantity": str(self.quantity),
            "unit": self.unit,
            "purchases": [
                {"date": p.date.isoformat(), "quantity": str(p.quantity), "value": amount(p.value)}
                for p in self.purchases
            ],
            "nextPurchaseDate": self.next_purchase_date.isoformat() if self.next_purchase_date else None,
            "nextPurchaseValue": amount(self.next_purchase_value),
            "estimatedValue": amount(self.estimated_value),
            "category": self.category,
            "store": self.store,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tolerance_cents: int = 0) -> "InventoryItem":
        """Create from a stored record (camelCase keys)."""

        def money(key: str) -> Money | None:
            value = data.get(key)
            return Money.from_value(value, tolerance_cents) if value is not None else None

        def instant(key: str) -> datetime | None:
            value = data.get(key)
            return parse_instant(value) if value else None

        try:
            purchases = [
                PurchaseRecord(
                    date=parse_instant(p["date"]),
                    quantity=p.get("quantity", 1),
                    value=Money.from_value(p["value"], tolerance_cents) if p.get("value") is not None else None,
                )
                for p in data.get("purchases") or []
            ]
            if not purchases and data.get("lastPurchaseDate"):
                purchases.append(
                    PurchaseRecord(
                        date=parse_instant(data["lastPurchaseDate"]),
                        quantity=data.get("lastPurchaseQuantity") or 1,
                        value=money("lastPurchaseValue"),
                    )
                )

            return cls(
                id=str(data["id"]),
                name=data["name"],
                quantity=data.get("quantity", 0),
                unit=data.get("unit", "un"),
                purchases=tuple(purchases),
                next_purchase_date=instant("nextPurchaseDate"),
                next_purchase_value=money("nextPurchaseValue"),
                estimated_value=money("estimatedValue"),
                category=data.get("category"),
                store=data.get("store"),
            )
        except KeyError as e:
            raise ValidationError(f"Inventory record missing field {e}") from e
