#!/usr/bin/env python3
"""
Budgets CLI - Monthly Budget and Savings Goal Progress
"""

from pathlib import Path

import click

from ..budgets import BudgetStatus, MonthlyBudget, track_budgets
from ..core.config import get_config
from ..core.currency import format_cents
from ..core.dates import month_key, parse_month_key
from ..core.exceptions import HouseholdError
from .common import now_option, open_snapshot, resolve_now, snapshot_option

STATUS_LABELS = {
    BudgetStatus.ON_TRACK: "on track",
    BudgetStatus.WARNING: "WARNING",
    BudgetStatus.OVER_BUDGET: "OVER BUDGET",
    BudgetStatus.IN_PROGRESS: "in progress",
    BudgetStatus.COMPLETE: "complete",
    BudgetStatus.MISSED: "MISSED",
}


@click.group()
def budgets() -> None:
    """Monthly budget and savings goal commands."""
    pass


@budgets.command()
@click.option("--month", help="Month whose budgets to show (YYYY-MM), defaults to the current month")
@snapshot_option
@now_option
def status(month: str | None, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Show progress of the month's budgets and all savings goals.

    Example:
      household budgets status --month 2024-03
    """
    config = get_config()
    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)
    shown = month or month_key(now)

    try:
        parse_month_key(shown)
    except HouseholdError as e:
        raise click.BadParameter(str(e), param_hint="--month") from e

    progress = track_budgets(
        snapshot.budgets,
        snapshot.entries,
        now,
        month=shown,
        warning_threshold=config.budgets.warning_threshold,
    )

    monthly = [p for p in progress if isinstance(p.budget, MonthlyBudget)]
    goals = [p for p in progress if not isinstance(p.budget, MonthlyBudget)]

    click.echo(f"Budgets for {shown}:")
    click.echo("=" * 60)
    if not monthly:
        click.echo("  No budgets for this month.")
    for p in monthly:
        click.echo(f"\n{p.budget.name} [{STATUS_LABELS[p.status]}]")
        click.echo(f"  Categories: {', '.join(p.budget.categories)}")
        click.echo(f"  Spent: {format_cents(p.current.cents)} of {format_cents(p.target.cents)} ({p.ratio * 100:.0f}%)")
        if p.over_budget:
            click.echo(f"  Over by: {format_cents(-p.remaining.cents)}")
        else:
            click.echo(f"  Remaining: {format_cents(p.remaining.cents)}")

    click.echo("\nSavings goals:")
    click.echo("=" * 60)
    if not goals:
        click.echo("  No savings goals.")
    for p in goals:
        click.echo(f"\n{p.budget.name} [{STATUS_LABELS[p.status]}]")
        click.echo(f"  Saved: {format_cents(p.current.cents)} of {format_cents(p.target.cents)} ({p.display_ratio * 100:.0f}%)")
        if p.budget.target_date is not None:
            click.echo(f"  Target date: {p.budget.target_date.date()}")
