#!/usr/bin/env python3
"""
Shopping CLI - Shopping List Progress and Check-Off
"""

from pathlib import Path

import click

from ..core.currency import format_cents
from ..core.exceptions import HouseholdError
from ..core.snapshot import save_snapshot
from ..shopping import check_off, display_order, summarize_list
from .common import now_option, open_snapshot, resolve_now, snapshot_option


@click.group()
def shopping() -> None:
    """Shopping list commands."""
    pass


@shopping.command()
@click.option("--items/--no-items", default=True, help="List the items (default: yes)")
@snapshot_option
def summary(items: bool, snapshot_path: Path | None) -> None:
    """
    Show how much of the shopping list is bought and what it costs.

    Example:
      household shopping summary --no-items
    """
    snapshot, _ = open_snapshot(snapshot_path)
    result = summarize_list(snapshot.shopping_items)

    click.echo(f"Bought: {result.bought_count}/{result.item_count} ({result.percent_display}%)")
    click.echo(f"Estimated total: {format_cents(result.total_estimated_value.cents)}")
    click.echo(f"Bought so far: {format_cents(result.total_bought_value.cents)}")

    if not items:
        return
    click.echo("=" * 60)
    for item in display_order(snapshot.shopping_items):
        mark = "x" if item.is_bought else " "
        value = format_cents(item.estimated_value.cents) if item.estimated_value is not None else "-"
        click.echo(f"[{mark}] {item.name} ({item.quantity} {item.unit})  {value}")


@shopping.command()
@click.argument("item_id")
@click.option("--by", "member", required=True, help="Member who bought the item")
@snapshot_option
@now_option
def check(item_id: str, member: str, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Check an item off, recording the expense and updating the inventory.

    Example:
      household shopping check milk --by alice
    """
    snapshot, path = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    item = next((i for i in snapshot.shopping_items if i.id == item_id), None)
    if item is None:
        raise click.ClickException(f"No shopping item with id {item_id}")

    try:
        result = check_off(item, member, now, snapshot.inventory, group_id=snapshot.group_id)
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    snapshot.shopping_items = [result.item if i.id == item_id else i for i in snapshot.shopping_items]
    if result.inventory_created:
        snapshot.inventory.append(result.inventory_item)
    else:
        snapshot.inventory = [
            result.inventory_item if i.id == result.inventory_item.id else i for i in snapshot.inventory
        ]
    if result.entry is not None:
        snapshot.entries.append(result.entry)
    save_snapshot(path, snapshot)

    click.echo(f"Checked off {item.name}")
    if result.entry is not None:
        click.echo(f"Recorded expense: {format_cents(result.entry.value.cents)} ({result.entry.category})")
    else:
        click.echo("No estimated value, no expense recorded")
    click.echo(f"Inventory: {result.inventory_item.quantity} {result.inventory_item.unit} in stock")
