"""
Budgets Package

Monthly spending budgets and savings goals with progress tracking.

Key Components:
- models: MonthlyBudget, SavingsGoal and the stored-record loader
- tracker: progress ratios and statuses for budgets and goals
"""

from .models import Budget, BudgetKind, MonthlyBudget, SavingsGoal, budget_from_dict
from .tracker import (
    BudgetProgress,
    BudgetStatus,
    contribute,
    monthly_spending,
    track_budget,
    track_budgets,
)

__all__ = [
    "Budget",
    "BudgetKind",
    "BudgetProgress",
    "BudgetStatus",
    "MonthlyBudget",
    "SavingsGoal",
    "budget_from_dict",
    "contribute",
    "monthly_spending",
    "track_budget",
    "track_budgets",
]
