#!/usr/bin/env python3
"""Tests for loading and saving household snapshot files."""

import json
import warnings

import pytest
import yaml

from household.budgets import MonthlyBudget, SavingsGoal
from household.core.exceptions import PrecisionWarning, ValidationError
from household.core.money import Money
from household.core.snapshot import Snapshot, load_snapshot, save_snapshot

SUB_CENT_ENTRY = {"id": "t1", "value": "10.004", "type": "expense", "category": "Fees", "date": "2024-03-01T00:00:00"}


class TestSnapshotLoading:
    """Test reading snapshot documents into domain objects."""

    def test_from_dict_builds_every_collection(self, sample_snapshot_data):
        """Test each section maps onto its domain type."""
        snapshot = Snapshot.from_dict(sample_snapshot_data)

        assert snapshot.group_id == "group-1"
        assert len(snapshot.entries) == 4
        assert [o.id for o in snapshot.obligations] == ["rent", "salary", "gym"]
        assert isinstance(snapshot.budgets[0], MonthlyBudget)
        assert isinstance(snapshot.budgets[2], SavingsGoal)
        assert snapshot.shopping_items[0].estimated_value == Money.from_cents(350)
        assert len(snapshot.inventory[0].purchases) == 3

    def test_legacy_last_purchase_fields_become_history(self, sample_snapshot_data):
        """Test inventory records with only last-purchase fields."""
        rice = Snapshot.from_dict(sample_snapshot_data).inventory[1]
        assert len(rice.purchases) == 1
        assert rice.purchases[0].value == Money.from_cents(1200)

    def test_empty_document(self):
        """Test an empty mapping gives an empty snapshot."""
        snapshot = Snapshot.from_dict({})
        assert snapshot.entries == []
        assert snapshot.budgets == []

    def test_missing_field_is_validation_error(self):
        """Test a transaction without a date is rejected."""
        with pytest.raises(ValidationError):
            Snapshot.from_dict({"transactions": [{"id": "t1", "value": 1, "type": "expense"}]})

    def test_non_mapping_rejected(self):
        """Test a top-level list is rejected."""
        with pytest.raises(ValidationError):
            Snapshot.from_dict([])  # type: ignore[arg-type]

    @pytest.mark.currency
    def test_sub_cent_amount_warns_by_default(self):
        """Test discarded sub-cent digits are reported with no tolerance configured."""
        with pytest.warns(PrecisionWarning):
            snapshot = Snapshot.from_dict({"transactions": [SUB_CENT_ENTRY]})
        assert snapshot.entries[0].value == Money.from_cents(1000)

    @pytest.mark.currency
    def test_tolerance_applies_to_every_record(self):
        """Test an explicit tolerance silences rounding in each section."""
        data = {
            "transactions": [SUB_CENT_ENTRY],
            "recurring": [
                {"id": "gym", "name": "Gym", "amount": "29.994", "frequency": "monthly", "nextDueDate": "2024-03-01"}
            ],
            "budgets": [{"id": "trip", "type": "goal", "targetAmount": "500.004", "amountSaved": "10.001"}],
            "shoppingItems": [{"id": "milk", "name": "Milk", "estimatedValue": "3.499"}],
            "inventory": [{"id": "rice", "name": "Rice", "purchases": [{"date": "2024-02-01", "value": "12.003"}]}],
        }
        with warnings.catch_warnings():
            warnings.simplefilter("error", PrecisionWarning)
            snapshot = Snapshot.from_dict(data, tolerance_cents=1)

        assert snapshot.obligations[0].amount == Money.from_cents(2999)
        assert snapshot.budgets[0].amount_saved == Money.from_cents(1000)
        assert snapshot.shopping_items[0].estimated_value == Money.from_cents(350)
        assert snapshot.inventory[0].purchases[0].value == Money.from_cents(1200)


class TestSnapshotFiles:
    """Test JSON and YAML snapshot files."""

    def test_load_json(self, temp_dir, sample_snapshot_data):
        """Test loading a JSON snapshot."""
        path = temp_dir / "snapshot.json"
        path.write_text(json.dumps(sample_snapshot_data), encoding="utf-8")

        snapshot = load_snapshot(path)
        assert len(snapshot.obligations) == 3

    def test_load_yaml_with_native_dates(self, temp_dir):
        """Test YAML timestamps parsed by PyYAML are accepted."""
        path = temp_dir / "snapshot.yaml"
        path.write_text(
            "transactions:\n"
            "  - id: t1\n"
            "    value: 12.5\n"
            "    type: expense\n"
            "    category: Groceries\n"
            "    date: 2024-03-05\n",
            encoding="utf-8",
        )

        snapshot = load_snapshot(path)
        assert snapshot.entries[0].value == Money.from_cents(1250)
        assert snapshot.entries[0].date.day == 5

    def test_malformed_json(self, temp_dir):
        """Test unparsable files raise ValidationError."""
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_snapshot(path)

    @pytest.mark.parametrize("name", ["snapshot.json", "snapshot.yml"], ids=["json", "yaml"])
    def test_save_then_load(self, temp_dir, sample_snapshot_data, name):
        """Test saved snapshots load back with the same content."""
        original = Snapshot.from_dict(sample_snapshot_data)
        path = temp_dir / "out" / name

        save_snapshot(path, original)
        reloaded = load_snapshot(path)

        assert reloaded.entries == original.entries
        assert reloaded.obligations == original.obligations
        assert reloaded.budgets == original.budgets

    def test_yaml_output_is_block_style(self, temp_dir, sample_snapshot_data):
        """Test YAML snapshots are written readable."""
        path = temp_dir / "snapshot.yaml"
        save_snapshot(path, Snapshot.from_dict(sample_snapshot_data))
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["groupId"] == "group-1"
        assert "{" not in path.read_text(encoding="utf-8").splitlines()[0]
