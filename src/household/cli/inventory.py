#!/usr/bin/env python3
"""
Inventory CLI - Stock and Purchase Forecasts
"""

from datetime import timedelta
from pathlib import Path

import click

from ..core.currency import format_cents
from ..core.money import sum_money
from ..inventory import forecast as forecast_purchases
from .common import now_option, open_snapshot, resolve_now, snapshot_option


@click.group()
def inventory() -> None:
    """Household inventory commands."""
    pass


@inventory.command()
@click.option("--days", type=int, default=30, show_default=True, help="Days ahead to forecast")
@click.option("--all", "show_all", is_flag=True, help="Include items with no predictable purchase date")
@snapshot_option
@now_option
def forecast(days: int, show_all: bool, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Predict upcoming purchases from each item's buying cadence.

    Example:
      household inventory forecast --days 14
    """
    if days < 0:
        raise click.BadParameter("must be non-negative", param_hint="--days")

    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    until = None if show_all else now + timedelta(days=days)
    forecasts = forecast_purchases(snapshot.inventory, until=until)

    if not forecasts:
        click.echo(f"No purchases expected in the next {days} days.")
        return

    click.echo("Expected purchases:")
    click.echo("=" * 60)
    for f in forecasts:
        when = str(f.next_date.date()) if f.next_date is not None else "unknown"
        overdue = " (overdue)" if f.next_date is not None and f.next_date < now else ""
        value = format_cents(f.planned_value.cents) if f.planned_value is not None else "-"
        click.echo(f"{when:<10}{overdue}  {f.item.name} ({f.item.quantity} {f.item.unit} left)  {value}")

    planned = sum_money(f.planned_value for f in forecasts if f.planned_value is not None)
    click.echo(f"\nPlanned spend: {format_cents(planned.cents)}")
