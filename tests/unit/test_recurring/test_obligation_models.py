#!/usr/bin/env python3
"""Tests for RecurringObligation and Frequency."""

from datetime import datetime

import pytest

from household.core.exceptions import ValidationError
from household.core.models import EntryType
from household.core.money import Money
from household.recurring import Frequency, RecurringObligation


def make_obligation(**overrides) -> RecurringObligation:
    fields = {
        "id": "rent",
        "name": "Rent",
        "amount": Money.from_cents(120000),
        "type": EntryType.EXPENSE,
        "category": "Housing",
        "frequency": Frequency.MONTHLY,
        "interval": 1,
        "next_due_date": datetime(2024, 1, 31),
    }
    fields.update(overrides)
    return RecurringObligation(**fields)


class TestFrequency:
    """Test frequency parsing and arithmetic."""

    @pytest.mark.recurring
    def test_parse(self):
        """Test parsing stored frequency tags."""
        assert Frequency.parse("Monthly") is Frequency.MONTHLY
        assert Frequency.parse(Frequency.DAILY) is Frequency.DAILY

    @pytest.mark.recurring
    def test_parse_rejects_unknown(self):
        """Test unknown frequencies are rejected, never coerced."""
        with pytest.raises(ValidationError):
            Frequency.parse("fortnightly")

    @pytest.mark.recurring
    @pytest.mark.parametrize(
        "frequency,units,expected",
        [
            (Frequency.DAILY, 3, datetime(2024, 2, 2)),
            (Frequency.WEEKLY, 2, datetime(2024, 2, 14)),
            (Frequency.MONTHLY, 1, datetime(2024, 2, 29)),
            (Frequency.YEARLY, 1, datetime(2025, 1, 31)),
        ],
        ids=["daily", "weekly", "monthly-clamped", "yearly"],
    )
    def test_add(self, frequency, units, expected):
        """Test adding units of each frequency."""
        assert frequency.add(datetime(2024, 1, 31), units) == expected

    @pytest.mark.recurring
    def test_periods_between(self):
        """Test whole periods between instants."""
        assert Frequency.MONTHLY.periods_between(datetime(2024, 1, 31), datetime(2024, 4, 1)) == 3
        assert Frequency.WEEKLY.periods_between(datetime(2024, 1, 1), datetime(2024, 1, 20)) == 2
        assert Frequency.DAILY.periods_between(datetime(2024, 1, 5), datetime(2024, 1, 1)) == 0


class TestRecurringObligation:
    """Test obligation construction and validation."""

    @pytest.mark.recurring
    def test_anchor_defaults_to_next_due(self):
        """Test the schedule anchor defaults to the initial due date."""
        obligation = make_obligation()
        assert obligation.anchor_date == datetime(2024, 1, 31)

    @pytest.mark.recurring
    def test_occurrences_follow_anchor(self):
        """Test occurrences derive from the anchor, not from each other."""
        obligation = make_obligation()
        assert obligation.occurrence(1) == datetime(2024, 2, 29)
        assert obligation.occurrence(2) == datetime(2024, 3, 31)

    @pytest.mark.recurring
    @pytest.mark.parametrize("interval", [0, -1, 1.5, True], ids=["zero", "negative", "fraction", "bool"])
    def test_invalid_interval_rejected(self, interval):
        """Test intervals must be positive integers."""
        with pytest.raises(ValidationError):
            make_obligation(interval=interval)

    @pytest.mark.recurring
    def test_negative_amount_rejected(self):
        """Test amounts must be non-negative."""
        with pytest.raises(ValidationError):
            make_obligation(amount=Money.from_cents(-1))

    @pytest.mark.recurring
    def test_anchor_after_due_rejected(self):
        """Test the anchor cannot lie after the next due date."""
        with pytest.raises(ValidationError):
            make_obligation(anchor_date=datetime(2024, 2, 1))

    @pytest.mark.recurring
    def test_from_dict_accepts_bill_spelling(self):
        """Test bill reminders stored with value/dueDate load."""
        obligation = RecurringObligation.from_dict(
            {
                "id": "power",
                "name": "Electricity",
                "value": 89.9,
                "category": "Utilities",
                "frequency": "monthly",
                "dueDate": "2024-03-12T00:00:00",
            }
        )
        assert obligation.amount == Money.from_cents(8990)
        assert obligation.type is EntryType.EXPENSE
        assert obligation.interval == 1
        assert obligation.is_active

    @pytest.mark.recurring
    def test_from_dict_missing_due_date(self):
        """Test a record without any due date is rejected."""
        with pytest.raises(ValidationError):
            RecurringObligation.from_dict({"id": "x", "name": "X", "amount": 1, "frequency": "daily"})

    @pytest.mark.recurring
    def test_with_changes_revalidates(self):
        """Test copies are validated again."""
        obligation = make_obligation()
        with pytest.raises(ValidationError):
            obligation.with_changes(interval=0)
