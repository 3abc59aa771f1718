#!/usr/bin/env python3
"""
Purchase Cadence and Forecasting

Stock bookkeeping and purchase predictions from an item's history.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from decimal import Decimal

from ..core.dates import DateRange, as_datetime
from ..core.money import Money
from .models import InventoryItem, PurchaseRecord


@dataclass(frozen=True)
class PurchaseForecast:
    """Next expected purchase of one item."""

    item: InventoryItem
    next_date: datetime | None
    planned_value: Money | None


def record_purchase(
    item: InventoryItem,
    at: date | datetime,
    quantity: Decimal,
    value: Money | None = None,
) -> InventoryItem:
    """Item with the purchase appended to its history and its stock increased."""
    purchase = PurchaseRecord(date=at, quantity=quantity, value=value)
    return replace(
        item,
        quantity=item.quantity + purchase.quantity,
        purchases=item.purchases + (purchase,),
    )


def purchase_cadence(item: InventoryItem) -> timedelta | None:
    """Mean gap between consecutive purchases; None with fewer than two."""
    if len(item.purchases) < 2:
        return None
    span = item.purchases[-1].date - item.purchases[0].date
    return span / (len(item.purchases) - 1)


def predict_next_purchase(item: InventoryItem) -> datetime | None:
    """
    When the item will next be bought.

    An explicitly planned date wins; otherwise the last purchase plus the
    mean cadence; otherwise unknown.
    """
    if item.next_purchase_date is not None:
        return item.next_purchase_date
    cadence = purchase_cadence(item)
    if cadence is None:
        return None
    return item.purchases[-1].date + cadence


def planned_value(item: InventoryItem) -> Money | None:
    """Expected cost of the next purchase: planned, else last paid, else estimated."""
    if item.next_purchase_value is not None:
        return item.next_purchase_value
    last = item.last_purchase
    if last is not None and last.value is not None:
        return last.value
    return item.estimated_value


def purchase_spend(items: Iterable[InventoryItem], period: DateRange) -> Money:
    """Total recorded purchase value within the inclusive period."""
    cents = 0
    for item in items:
        for purchase in item.purchases:
            if purchase.value is not None and period.contains(purchase.date):
                cents += purchase.value.cents
    return Money.from_cents(cents)


def forecast(items: Iterable[InventoryItem], until: date | datetime | None = None) -> list[PurchaseForecast]:
    """
    Forecasts for every item, soonest first; items with no predictable date last.

    With `until`, only items predicted on or before that instant are kept.
    """
    forecasts = [
        PurchaseForecast(item=item, next_date=predict_next_purchase(item), planned_value=planned_value(item))
        for item in items
    ]
    if until is not None:
        limit = as_datetime(until)
        forecasts = [f for f in forecasts if f.next_date is not None and f.next_date <= limit]
    return sorted(forecasts, key=lambda f: (f.next_date is None, f.next_date or datetime.min, f.item.name))
