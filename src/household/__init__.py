"""
Household Ledger - Shared Household Finance Core

Recurring bills and income, realized transactions, monthly budgets and savings
goals, shopping lists and pantry inventory for a household group.

Domain Packages:
- core: Money, dates, entry model, configuration, snapshot files
- recurring: Recurring obligation scheduling and honoring
- ledger: Period summaries, insights and monthly history
- budgets: Monthly budgets and savings goals
- shopping: Shopping list summaries and check-off
- inventory: Stock, purchase cadence and forecasts
- cli: Command-line interface

Example Usage:
    from household.core import Money, MonetaryEntry, month_range
    from household.ledger import summarize
    from household.recurring import honor, upcoming
"""

__version__ = "0.1.0"
__author__ = "Household Ledger Developers"

from .core.config import Environment, get_config
from .core.models import EntryType, MonetaryEntry
from .core.money import Money

__all__ = [
    "EntryType",
    "Environment",
    "MonetaryEntry",
    "Money",
    "get_config",
]
