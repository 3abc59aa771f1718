#!/usr/bin/env python3
"""
Recurring CLI - Bills and Recurring Income

List, preview and honor recurring obligations stored in a snapshot. Commands
that change an obligation write the snapshot back unless --dry-run is given.
"""

from pathlib import Path

import click

from ..core.config import get_config
from ..core.currency import format_cents
from ..core.exceptions import ConflictError, HouseholdError
from ..core.models import EntryType
from ..core.snapshot import Snapshot, save_snapshot
from ..recurring import (
    InMemoryObligationStore,
    ObligationState,
    RecurringObligation,
    classify,
    deactivate,
    honor_with_store,
    reactivate,
    upcoming as upcoming_obligations,
)
from .common import is_verbose, now_option, open_snapshot, resolve_now, snapshot_option

STATE_LABELS = {
    ObligationState.ACTIVE_PENDING: "pending",
    ObligationState.ACTIVE_OVERDUE: "OVERDUE",
    ObligationState.INACTIVE: "paused",
}


def _describe(obligation: RecurringObligation) -> str:
    sign = "-" if obligation.type is EntryType.EXPENSE else "+"
    every = obligation.frequency.value if obligation.interval == 1 else f"every {obligation.interval} {obligation.frequency.value}"
    return f"{obligation.name} ({sign}{format_cents(obligation.amount.cents)}, {every})"


def _find(snapshot: Snapshot, obligation_id: str) -> RecurringObligation:
    for obligation in snapshot.obligations:
        if obligation.id == obligation_id:
            return obligation
    raise click.ClickException(f"No recurring obligation with id {obligation_id}")


def _replace(snapshot: Snapshot, updated: RecurringObligation) -> None:
    snapshot.obligations = [updated if o.id == updated.id else o for o in snapshot.obligations]


@click.group()
def recurring() -> None:
    """Recurring bills and income commands."""
    pass


@recurring.command(name="list")
@click.option("--active-only", is_flag=True, help="Hide paused obligations")
@snapshot_option
@now_option
@click.pass_context
def list_obligations(ctx: click.Context, active_only: bool, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    List recurring obligations with their next due date and state.

    Example:
      household recurring list --active-only
    """
    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    obligations = sorted(snapshot.obligations, key=lambda o: (not o.is_active, o.next_due_date, o.name))
    if active_only:
        obligations = [o for o in obligations if o.is_active]

    if not obligations:
        click.echo("No recurring obligations.")
        return

    click.echo("Recurring obligations:")
    click.echo("=" * 60)
    for obligation in obligations:
        state = classify(obligation, now)
        click.echo(f"{obligation.next_due_date.date()}  [{STATE_LABELS[state]:>7}]  {_describe(obligation)}")
        if is_verbose(ctx) and obligation.notes:
            click.echo(f"    {obligation.notes}")


@recurring.command()
@click.option("--days", type=int, help="Days ahead to include (default from UPCOMING_DAYS_AHEAD)")
@snapshot_option
@now_option
def upcoming(days: int | None, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Show active obligations due in the next days.

    Example:
      household recurring upcoming --days 7
    """
    config = get_config()
    snapshot, _ = open_snapshot(snapshot_path)
    now = resolve_now(now_value)

    days_ahead = days if days is not None else config.recurring.upcoming_days_ahead
    if days_ahead < 0:
        raise click.BadParameter("must be non-negative", param_hint="--days")

    summary = upcoming_obligations(snapshot.obligations, now, days_ahead=days_ahead)
    click.echo(f"Due in the next {days_ahead} days: {summary.count}")
    for obligation in summary.obligations:
        click.echo(f"  {obligation.next_due_date.date()}  {_describe(obligation)}")
    click.echo(f"Bills: {format_cents(summary.total_expenses.cents)}")
    click.echo(f"Income: {format_cents(summary.total_income.cents)}")


@recurring.command()
@click.argument("obligation_id")
@click.option("--by", "member", help="Member recording the payment")
@click.option("--dry-run", is_flag=True, help="Show the result without writing the snapshot")
@snapshot_option
@now_option
def honor(obligation_id: str, member: str | None, dry_run: bool, snapshot_path: Path | None, now_value: str | None) -> None:
    """
    Record the current occurrence of an obligation and advance it.

    Adds one transaction dated at the due date and moves the obligation to
    its next due date.

    Example:
      household recurring honor rent --by alice
    """
    snapshot, path = open_snapshot(snapshot_path)
    now = resolve_now(now_value)
    _find(snapshot, obligation_id)

    store = InMemoryObligationStore(snapshot.obligations)
    try:
        result = honor_with_store(store, obligation_id, now, created_by=member)
    except ConflictError as e:
        raise click.ClickException(f"Obligation was changed concurrently: {e}") from e
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    entry = result.entry
    click.echo(f"Recorded {entry.description}: {format_cents(entry.value.cents)} on {entry.date.date()}")
    if result.skipped_periods:
        click.echo(f"Skipped {result.skipped_periods} missed period(s)")
    if result.obligation.is_active:
        click.echo(f"Next due: {result.obligation.next_due_date.date()}")
    else:
        click.echo("Obligation has reached its end date and is now paused")

    if dry_run:
        click.echo("Dry run: snapshot not written")
        return

    snapshot.entries.append(entry)
    _replace(snapshot, result.obligation)
    save_snapshot(path, snapshot)


@recurring.command()
@click.argument("obligation_id")
@snapshot_option
def pause(obligation_id: str, snapshot_path: Path | None) -> None:
    """Stop an obligation from coming due; its due date is kept."""
    snapshot, path = open_snapshot(snapshot_path)
    updated = deactivate(_find(snapshot, obligation_id))
    _replace(snapshot, updated)
    save_snapshot(path, snapshot)
    click.echo(f"Paused {updated.name}")


@recurring.command()
@click.argument("obligation_id")
@snapshot_option
@now_option
def resume(obligation_id: str, snapshot_path: Path | None, now_value: str | None) -> None:
    """Reactivate an obligation at its next occurrence on or after now."""
    snapshot, path = open_snapshot(snapshot_path)
    now = resolve_now(now_value)
    updated = reactivate(_find(snapshot, obligation_id), now)
    if not updated.is_active:
        raise click.ClickException(f"{updated.name} has passed its end date and cannot be resumed")
    _replace(snapshot, updated)
    save_snapshot(path, snapshot)
    click.echo(f"Resumed {updated.name}, next due {updated.next_due_date.date()}")
