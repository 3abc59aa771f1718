"""
Inventory Package

Household stock of recurring purchases.

Key Components:
- models: InventoryItem and its PurchaseRecord history
- cadence: stock bookkeeping, purchase cadence and next-purchase forecasts
"""

from .cadence import (
    PurchaseForecast,
    forecast,
    planned_value,
    predict_next_purchase,
    purchase_cadence,
    purchase_spend,
    record_purchase,
)
from .models import InventoryItem, PurchaseRecord

__all__ = [
    "InventoryItem",
    "PurchaseForecast",
    "PurchaseRecord",
    "forecast",
    "planned_value",
    "predict_next_purchase",
    "purchase_cadence",
    "purchase_spend",
    "record_purchase",
]
