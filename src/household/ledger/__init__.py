"""
Ledger Package

Aggregation of realized income and expenses into period summaries.

Key Components:
- aggregator: summarize, month/week summaries, dashboard cards, category totals
- insights: category breakdown, period comparison, forecast, weekday trends
- history: month-by-month summaries as a pandas DataFrame
"""

from .aggregator import (
    DashboardSummary,
    FinancialSummary,
    dashboard,
    entries_in_range,
    spending_by_category,
    summarize,
    summarize_month,
    summarize_week,
)
from .history import monthly_history
from .insights import (
    CategoryShare,
    SpendingChange,
    TemporalTrends,
    category_breakdown,
    compare_spending,
    forecast_month_expenses,
    spending_change_percent,
    temporal_trends,
    top_increase,
)

__all__ = [
    "CategoryShare",
    "DashboardSummary",
    "FinancialSummary",
    "SpendingChange",
    "TemporalTrends",
    "category_breakdown",
    "compare_spending",
    "dashboard",
    "entries_in_range",
    "forecast_month_expenses",
    "monthly_history",
    "spending_by_category",
    "spending_change_percent",
    "summarize",
    "summarize_month",
    "summarize_week",
    "temporal_trends",
    "top_increase",
]
