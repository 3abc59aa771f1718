"""
Shopping Package

Shared shopping lists: items, list summaries and checking items off.

Key Components:
- models: ShoppingItem, mark_bought/unmark_bought, display ordering
- summary: bought percentage and value totals for a list
- checkoff: purchase entry and inventory update when an item is bought
"""

from .checkoff import CheckOff, Uncheck, check_off, uncheck
from .models import ShoppingItem, display_order, mark_bought, unmark_bought
from .summary import ShoppingListSummary, summarize_list

__all__ = [
    "CheckOff",
    "ShoppingItem",
    "ShoppingListSummary",
    "Uncheck",
    "check_off",
    "display_order",
    "mark_bought",
    "summarize_list",
    "uncheck",
    "unmark_bought",
]
