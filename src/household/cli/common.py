#!/usr/bin/env python3
"""
Shared CLI Options and Helpers

Every command reads a household snapshot file and takes an explicit `--now`;
the wall clock is only consulted here, at the edge.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from ..core.config import get_config
from ..core.dates import parse_instant
from ..core.exceptions import HouseholdError
from ..core.snapshot import Snapshot, load_snapshot

DEFAULT_SNAPSHOT_NAME = "snapshot.json"


def snapshot_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --snapshot option (defaults to <data dir>/snapshot.json)."""
    return click.option(
        "--snapshot",
        "snapshot_path",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Snapshot file (JSON or YAML), defaults to <data dir>/snapshot.json",
    )(func)


def now_option(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --now option."""
    return click.option("--now", "now_value", help="Current instant (ISO format), defaults to now")(func)


def resolve_now(value: str | None) -> datetime:
    """Parse --now, falling back to the local wall clock."""
    if not value:
        return datetime.now()
    try:
        return parse_instant(value)
    except HouseholdError as e:
        raise click.BadParameter(str(e), param_hint="--now") from e


def resolve_snapshot_path(path: Path | None) -> Path:
    return path if path is not None else get_config().data_dir / DEFAULT_SNAPSHOT_NAME


def open_snapshot(path: Path | None) -> tuple[Snapshot, Path]:
    """
    Load the snapshot for a command.

    Raises:
        click.ClickException: If the file is missing or malformed
    """
    resolved = resolve_snapshot_path(path)
    if not resolved.exists():
        raise click.ClickException(f"Snapshot file not found: {resolved}")
    try:
        return load_snapshot(resolved), resolved
    except HouseholdError as e:
        raise click.ClickException(f"Invalid snapshot {resolved}: {e}") from e


def is_verbose(ctx: click.Context, verbose: bool = False) -> bool:
    return verbose or bool((ctx.obj or {}).get("verbose", False))
