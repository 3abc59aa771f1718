#!/usr/bin/env python3
"""
Monthly History

Month-by-month income, expenses and balance as a pandas DataFrame, for the
history screen and CLI reports. Each row is produced by the aggregator, so
amounts stay exact; the DataFrame holds Decimal values.
"""

from collections.abc import Iterable

import pandas as pd

from ..core.dates import shift_month_key
from ..core.models import MonetaryEntry
from .aggregator import summarize_month

HISTORY_COLUMNS = ["income", "expenses", "balance"]


def monthly_history(entries: Iterable[MonetaryEntry], last_month: str, months: int = 6) -> pd.DataFrame:
    """
    Summaries for the `months` months ending with `last_month` (inclusive).

    Args:
        entries: Snapshot of realized entries
        last_month: Most recent month key ("YYYY-MM")
        months: How many months to include

    Returns:
        DataFrame indexed by month key (oldest first) with income, expenses
        and balance columns of Decimal amounts
    """
    snapshot = list(entries)
    keys = [shift_month_key(last_month, offset) for offset in range(-(months - 1), 1)]

    records = []
    for key in keys:
        summary = summarize_month(snapshot, key)
        records.append(
            {
                "month": key,
                "income": summary.income.to_decimal(),
                "expenses": summary.expenses.to_decimal(),
                "balance": summary.balance.to_decimal(),
            }
        )

    df = pd.DataFrame.from_records(records, columns=["month", *HISTORY_COLUMNS])
    df.set_index("month", inplace=True)
    return df
