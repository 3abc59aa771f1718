#!/usr/bin/env python3
"""
Main CLI Entry Point for the Household Ledger

Provides a unified command-line interface over household snapshot files.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..core.exceptions import HouseholdError


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Household Ledger - Shared Household Finances

    Recurring bills, transactions, budgets, shopping lists and inventory for
    a household group, read from a snapshot file.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["HOUSEHOLD_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if config_env or debug else get_config()
    except HouseholdError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("household").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from household import __author__, __version__

    click.echo(f"Household Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")
    click.echo(f"  Budget Warning Threshold: {config_obj.budgets.warning_threshold}")
    click.echo(f"  Upcoming Days Ahead: {config_obj.recurring.upcoming_days_ahead}")
    click.echo(f"  Precision Tolerance (cents): {config_obj.ledger.precision_tolerance_cents}")
    click.echo(f"  History Months: {config_obj.ledger.history_months}")


# Import command groups
from .budgets import budgets  # noqa: E402
from .inventory import inventory  # noqa: E402
from .ledger import ledger  # noqa: E402
from .recurring import recurring  # noqa: E402
from .shopping import shopping  # noqa: E402

main.add_command(ledger)
main.add_command(budgets)
main.add_command(recurring)
main.add_command(shopping)
main.add_command(inventory)


if __name__ == "__main__":
    main()
