#!/usr/bin/env python3
"""
Checking Items Off a Shopping List

Checking an item off marks it bought, records the purchase in the household
inventory (creating the inventory item when none has the same name), and,
when the item has a positive estimated value, produces an expense entry
linked back to the item. Unchecking clears the item and names the linked
entry to remove; inventory stock is left as it is.

All results are returned as new values for the caller to persist together.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, datetime

from ..core.dates import as_datetime
from ..core.exceptions import ValidationError
from ..core.models import EntryType, MonetaryEntry
from ..inventory.cadence import record_purchase
from ..inventory.models import InventoryItem
from .models import ShoppingItem, mark_bought, unmark_bought

logger = logging.getLogger(__name__)

DEFAULT_EXPENSE_CATEGORY = "Shopping"
DEFAULT_INVENTORY_CATEGORY = "General"


@dataclass(frozen=True)
class CheckOff:
    """Everything that changes when one item is checked off."""

    item: ShoppingItem
    entry: MonetaryEntry | None
    inventory_item: InventoryItem
    inventory_created: bool


@dataclass(frozen=True)
class Uncheck:
    """The item put back on the list and the entry id to delete, if any."""

    item: ShoppingItem
    removed_entry_id: str | None


def check_off(
    item: ShoppingItem,
    by: str,
    at: date | datetime,
    inventory: Iterable[InventoryItem],
    group_id: str = "",
) -> CheckOff:
    """
    Mark an item bought and derive the entry and inventory changes.

    Args:
        item: Item still on the list
        by: Member checking the item off
        at: Instant of the purchase
        inventory: Current inventory snapshot, searched by exact name
        group_id: Household group the expense entry belongs to

    Returns:
        CheckOff with the updated item, the new expense entry (None when the
        item has no positive estimated value) and the new or updated
        inventory item

    Raises:
        ValidationError: If the item is already bought
    """
    if item.is_bought:
        raise ValidationError(f"Shopping item {item.id} is already bought")

    at = as_datetime(at)
    bought = mark_bought(item, by, at)

    entry = None
    if item.estimated_value is not None and item.estimated_value.cents > 0:
        entry = MonetaryEntry(
            id=f"{item.id}-{at:%Y%m%d%H%M%S}",
            value=item.estimated_value,
            type=EntryType.EXPENSE,
            category=item.category or DEFAULT_EXPENSE_CATEGORY,
            date=at,
            group_id=group_id,
            description=f"Purchase: {item.name}",
            created_by=by,
        )
        bought = replace(bought, linked_entry_id=entry.id)
    else:
        logger.warning(f"Item {item.id} ({item.name}) checked off without an estimated value, no expense recorded")

    existing = next((inv for inv in inventory if inv.name == item.name), None)
    created = existing is None
    if existing is None:
        existing = InventoryItem(
            id=f"inv-{item.id}",
            name=item.name,
            unit=item.unit,
            category=item.category or DEFAULT_INVENTORY_CATEGORY,
            store=item.store,
        )
        logger.debug(f"Creating inventory item for {item.name}")

    stocked = record_purchase(existing, at, item.quantity, item.estimated_value)
    stocked = replace(
        stocked,
        unit=item.unit or stocked.unit,
        category=item.category or stocked.category,
        store=item.store or stocked.store,
    )

    return CheckOff(item=bought, entry=entry, inventory_item=stocked, inventory_created=created)


def uncheck(item: ShoppingItem) -> Uncheck:
    """Put a bought item back on the list."""
    return Uncheck(item=unmark_bought(item), removed_entry_id=item.linked_entry_id)
