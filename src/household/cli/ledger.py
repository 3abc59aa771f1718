#!/usr/bin/env python3
"""
Ledger CLI - Period Summaries and Spending Insights

Command-line reports over the realized transactions of a snapshot.
"""

import math
from pathlib import Path

import click

from ..core.config import get_config
from ..core.currency import format_cents
from ..core.dates import DateRange, end_of_day, month_key, month_range, parse_instant, previous_month_key, week_range
from ..core.exceptions import HouseholdError
from ..core.money import Money
from ..ledger import (
    FinancialSummary,
    category_breakdown,
    compare_spending,
    dashboard,
    entries_in_range,
    forecast_month_expenses,
    monthly_history,
    spending_by_category,
    summarize,
    temporal_trends,
)
from .common import is_verbose, now_option, open_snapshot, resolve_now, snapshot_option


def _echo_summary(title: str, period: DateRange, summary: FinancialSummary) -> None:
    click.echo(f"\n{title}")
    click.echo(f"  Period:   {period.start.date()} to {period.end.date()}")
    click.echo(f"  Income:   {format_cents(summary.income.cents)}")
    click.echo(f"  Expenses: {format_cents(summary.expenses.cents)}")
    click.echo(f"  Balance:  {format_cents(summary.balance.cents)}")


def _echo_categories(spending: dict[str, Money]) -> None:
    shares = category_breakdown(spending)
    if not shares:
        click.echo("  No expenses in this period.")
        return
    for share in shares:
        click.echo(f"  {share.category:<24} {format_cents(share.total.cents):>12}  {share.percentage:>3}%")


@click.group()
def ledger() -> None:
    """Income, expense and balance reports."""
    pass


@ledger.command()
@click.option("--month", help="Month to summarize (YYYY-MM)")
@click.option("--week", help="Summarize the Monday-to-Sunday week containing this date (YYYY-MM-DD)")
@click.option("--start", help="Start date (YYYY-MM-DD), requires --end")
@click.option("--end", help="End date (YYYY-MM-DD, inclusive), requires --start")
@click.option("--by-category", is_flag=True, help="Also break expenses down by category")
@snapshot_option
@now_option
@click.pass_context
def summary(
    ctx: click.Context,
    month: str | None,
    week: str | None,
    start: str | None,
    end: str | None,
    by_category: bool,
    snapshot_path: Path | None,
    now_value: str | None,
) -> None:
    """
    Summarize income, expenses and balance.

    Without a period option, shows the current month and current week.

    Examples:
      household ledger summary --month 2024-03
      household ledger summary --week 2024-03-17
      household ledger summary --start 2024-01-01 --end 2024-03-31 --by-category
    """
    selectors = [name for name, value in (("--month", month), ("--week", week), ("--start/--end", start or end)) if value]
    if len(selectors) > 1:
        raise click.UsageError(f"Choose one period option, got {', '.join(selectors)}")
    if bool(start) != bool(end):
        raise click.UsageError("--start and --end must be given together")

    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    try:
        if month:
            periods = [(f"Month {month}", month_range(month))]
        elif week:
            periods = [("Week", week_range(parse_instant(week)))]
        elif start and end:
            periods = [("Custom period", DateRange(start=parse_instant(start), end=end_of_day(parse_instant(end))))]
        else:
            cards = dashboard(snapshot.entries, now)
            _echo_summary(f"This month ({cards.month_key})", month_range(now), cards.month)
            _echo_summary("This week", cards.week_range, cards.week)
            if by_category:
                click.echo("\nSpending by category:")
                _echo_categories(spending_by_category(snapshot.entries, month_range(now)))
            return
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    for title, period in periods:
        _echo_summary(title, period, summarize(snapshot.entries, period))
        if is_verbose(ctx):
            click.echo(f"  Entries:  {len(entries_in_range(snapshot.entries, period))}")
        if by_category:
            click.echo("\nSpending by category:")
            _echo_categories(spending_by_category(snapshot.entries, period))


@ledger.command()
@click.option("--months", type=int, help="Number of months to show (default from HISTORY_MONTHS)")
@click.option("--month", "last_month", help="Most recent month to show (YYYY-MM), defaults to the current month")
@snapshot_option
@now_option
def history(months: int | None, last_month: str | None, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Show month-by-month income, expenses and balance.

    Example:
      household ledger history --months 12
    """
    config = get_config()
    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    count = months if months is not None else config.ledger.history_months
    if count < 1:
        raise click.BadParameter("must be at least 1", param_hint="--months")

    try:
        df = monthly_history(snapshot.entries, last_month or month_key(now), months=count)
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{'Month':<10} {'Income':>14} {'Expenses':>14} {'Balance':>14}")
    click.echo("=" * 55)
    for row in df.itertuples():
        click.echo(
            f"{row.Index:<10} "
            f"{format_cents(Money.from_value(row.income).cents):>14} "
            f"{format_cents(Money.from_value(row.expenses).cents):>14} "
            f"{format_cents(Money.from_value(row.balance).cents):>14}"
        )


@ledger.command()
@click.option("--month", help="Month to analyze (YYYY-MM), defaults to the current month")
@snapshot_option
@now_option
def insights(month: str | None, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Compare a month's spending with the month before.

    Shows category changes, a month-end forecast for the current month and
    the weekday/weekend split.
    """
    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)
    shown = month or month_key(now)

    try:
        current_range = month_range(shown)
        previous_range = month_range(previous_month_key(shown))
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    current = spending_by_category(snapshot.entries, current_range)
    previous = spending_by_category(snapshot.entries, previous_range)
    current_total = summarize(snapshot.entries, current_range).expenses

    click.echo(f"Spending insights for {shown}")
    click.echo("=" * 60)
    click.echo(f"Total expenses: {format_cents(current_total.cents)}")

    if shown == month_key(now):
        projected = forecast_month_expenses(current_total, now)
        if projected is not None:
            click.echo(f"Projected by month end: {format_cents(projected.cents)}")

    changes = compare_spending(current, previous)
    click.echo(f"\nChanges vs {previous_month_key(shown)}:")
    if not changes:
        click.echo("  No spending in either month.")
    for change in changes:
        if change.change_percent is None:
            percent = "-"
        elif math.isinf(change.change_percent):
            percent = "new"
        else:
            percent = f"{change.change_percent:+.0f}%"
        click.echo(f"  {change.category:<24} {format_cents(change.change_amount.cents):>12}  {percent:>6}")

    trends = temporal_trends(entries_in_range(snapshot.entries, current_range))
    if trends.busiest_day is not None:
        click.echo(f"\nBusiest day: {trends.busiest_day} ({format_cents(trends.busiest_day_total.cents)})")
        click.echo(f"Weekend: {trends.weekend_percentage}%  Weekdays: {trends.weekday_percentage}%")
