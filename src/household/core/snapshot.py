#!/usr/bin/env python3
"""
Household Snapshot Files

A snapshot is one document holding a household's entries, recurring
obligations, budgets, shopping items and inventory, as exported from the
document store. The CLI reads snapshots and writes them back after honoring
obligations; the core packages only ever see the loaded domain objects.

Format is chosen by file extension: `.yaml`/`.yml` via PyYAML, anything else
as pretty-printed JSON.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .config import get_config
from .exceptions import ValidationError
from .models import MonetaryEntry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass
class Snapshot:
    """Everything the CLI needs about one household."""

    group_id: str = ""
    entries: list = field(default_factory=list)
    obligations: list = field(default_factory=list)
    budgets: list = field(default_factory=list)
    shopping_items: list = field(default_factory=list)
    inventory: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], tolerance_cents: int | None = None) -> "Snapshot":
        """
        Build a snapshot from its document form.

        Amounts are converted with `tolerance_cents` of discarded precision
        accepted silently, defaulting to the configured PRECISION_TOLERANCE_CENTS.

        Raises:
            ValidationError: If a record is malformed or missing a field
        """
        # Imported here: the domain packages depend on core, not the reverse.
        from ..budgets.models import budget_from_dict
        from ..inventory.models import InventoryItem
        from ..recurring.models import RecurringObligation
        from ..shopping.models import ShoppingItem

        if not isinstance(data, dict):
            raise ValidationError(f"Snapshot must be a mapping, got {type(data).__name__}")

        if tolerance_cents is None:
            tolerance_cents = get_config().ledger.precision_tolerance_cents

        try:
            return cls(
                group_id=str(data.get("groupId", "")),
                entries=[MonetaryEntry.from_dict(r, tolerance_cents) for r in data.get("transactions") or []],
                obligations=[RecurringObligation.from_dict(r, tolerance_cents) for r in data.get("recurring") or []],
                budgets=[budget_from_dict(r, tolerance_cents) for r in data.get("budgets") or []],
                shopping_items=[ShoppingItem.from_dict(r, tolerance_cents) for r in data.get("shoppingItems") or []],
                inventory=[InventoryItem.from_dict(r, tolerance_cents) for r in data.get("inventory") or []],
            )
        except KeyError as e:
            raise ValidationError(f"Snapshot record missing field {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "groupId": self.group_id,
            "transactions": [e.to_dict() for e in self.entries],
            "recurring": [o.to_dict() for o in self.obligations],
            "budgets": [b.to_dict() for b in self.budgets],
            "shoppingItems": [i.to_dict() for i in self.shopping_items],
            "inventory": [i.to_dict() for i in self.inventory],
        }


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def read_document(path: str | Path) -> Any:
    """Parse a JSON or YAML file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if _is_yaml(path):
            return yaml.safe_load(f) or {}
        return json.load(f)


def write_document(path: str | Path, data: Any) -> None:
    """Write data as pretty-printed JSON or block-style YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if _is_yaml(path):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)


def load_snapshot(path: str | Path, tolerance_cents: int | None = None) -> Snapshot:
    """
    Load a household snapshot file.

    Amounts are converted as in Snapshot.from_dict.

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file cannot be parsed or holds malformed records
    """
    try:
        data = read_document(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot parse snapshot {path}: {e}") from e

    snapshot = Snapshot.from_dict(data, tolerance_cents)
    logger.debug(
        f"Loaded snapshot {path}: {len(snapshot.entries)} entries, "
        f"{len(snapshot.obligations)} recurring, {len(snapshot.budgets)} budgets"
    )
    return snapshot


def save_snapshot(path: str | Path, snapshot: Snapshot) -> None:
    """Write a snapshot back in the format implied by its extension."""
    write_document(path, snapshot.to_dict())
    logger.info(f"Saved snapshot to {path}")
