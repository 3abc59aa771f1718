"""
Recurring Obligations Package

Schedules recurring bills and income, advances them when they are honored,
and answers "what is due soon" questions.

Key Components:
- models: Frequency, ObligationState, RecurringObligation
- engine: advance, classify, deactivate, reactivate, honor, overdue, upcoming
- store: compare-and-set boundary for concurrent advancement
"""

from .engine import (
    Honoring,
    UpcomingSummary,
    advance,
    classify,
    deactivate,
    honor,
    overdue,
    reactivate,
    upcoming,
)
from .models import Frequency, ObligationState, RecurringObligation
from .store import (
    InMemoryObligationStore,
    ObligationStore,
    advance_with_store,
    honor_with_store,
)

__all__ = [
    "Frequency",
    "Honoring",
    "InMemoryObligationStore",
    "ObligationState",
    "ObligationStore",
    "RecurringObligation",
    "UpcomingSummary",
    "advance",
    "advance_with_store",
    "classify",
    "deactivate",
    "honor",
    "honor_with_store",
    "overdue",
    "reactivate",
    "upcoming",
]
