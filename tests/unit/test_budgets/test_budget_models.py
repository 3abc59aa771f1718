#!/usr/bin/env python3
"""Tests for budget and savings goal records."""

from datetime import datetime

import pytest

from household.budgets import BudgetKind, MonthlyBudget, SavingsGoal, budget_from_dict
from household.core.exceptions import ConfigurationError, ValidationError
from household.core.money import Money


class TestMonthlyBudget:
    """Test monthly budget construction."""

    @pytest.mark.budgets
    def test_single_category_string(self):
        """Test a bare category string becomes a one-item tuple."""
        budget = MonthlyBudget(id="b1", name="Food", target_amount=200, categories="Groceries", month_year="2024-03")
        assert budget.categories == ("Groceries",)
        assert budget.target_amount == Money.from_cents(20000)
        assert budget.kind is BudgetKind.MONTHLY

    @pytest.mark.budgets
    @pytest.mark.parametrize("target", [0, -10], ids=["zero", "negative"])
    def test_target_must_be_positive(self, target):
        """Test non-positive targets are rejected."""
        with pytest.raises(ValidationError):
            MonthlyBudget(id="b1", name="Food", target_amount=target, categories=("Groceries",), month_year="2024-03")

    @pytest.mark.budgets
    @pytest.mark.parametrize(
        "categories,month_year",
        [((), "2024-03"), (("Groceries",), ""), (("Groceries",), "2024-13")],
        ids=["no-categories", "no-month", "bad-month"],
    )
    def test_missing_fields_are_configuration_errors(self, categories, month_year):
        """Test a monthly budget needs categories and a valid month."""
        with pytest.raises(ConfigurationError):
            MonthlyBudget(id="b1", name="Food", target_amount=100, categories=categories, month_year=month_year)


class TestSavingsGoal:
    """Test savings goal construction and contributions."""

    @pytest.mark.budgets
    def test_defaults(self):
        """Test a new goal has nothing saved and no deadline."""
        goal = SavingsGoal(id="g1", name="Bike", target_amount=500)
        assert goal.amount_saved == Money.zero()
        assert goal.target_date is None
        assert goal.kind is BudgetKind.GOAL

    @pytest.mark.budgets
    def test_negative_saved_rejected(self):
        """Test a goal cannot start below zero."""
        with pytest.raises(ConfigurationError):
            SavingsGoal(id="g1", name="Bike", target_amount=500, amount_saved=-1)

    @pytest.mark.budgets
    def test_contribute_adds(self):
        """Test contributions accumulate without mutating the original."""
        goal = SavingsGoal(id="g1", name="Bike", target_amount=500, amount_saved=100)
        updated = goal.contribute(Money.from_value("49.99"))
        assert updated.amount_saved == Money.from_cents(14999)
        assert goal.amount_saved == Money.from_cents(10000)

    @pytest.mark.budgets
    @pytest.mark.parametrize("amount", [0, -5], ids=["zero", "negative"])
    def test_contribute_must_be_positive(self, amount):
        """Test zero and negative contributions are rejected."""
        goal = SavingsGoal(id="g1", name="Bike", target_amount=500)
        with pytest.raises(ValidationError):
            goal.contribute(Money.from_value(amount))


class TestBudgetFromDict:
    """Test loading stored budget records."""

    @pytest.mark.budgets
    def test_monthly_record(self):
        """Test a monthly record with a legacy single category."""
        budget = budget_from_dict(
            {"id": "b1", "name": "Food", "type": "monthly", "targetAmount": "150.50",
             "category": "Groceries", "monthYear": "2024-03", "amountSaved": None}
        )
        assert isinstance(budget, MonthlyBudget)
        assert budget.categories == ("Groceries",)
        assert budget.target_amount == Money.from_cents(15050)

    @pytest.mark.budgets
    def test_goal_record(self):
        """Test a goal record parses its deadline."""
        goal = budget_from_dict(
            {"id": "g1", "name": "Trip", "type": "goal", "targetAmount": 1000,
             "amountSaved": 250, "targetDate": "2024-12-31T00:00:00", "categories": []}
        )
        assert isinstance(goal, SavingsGoal)
        assert goal.amount_saved == Money.from_cents(25000)
        assert goal.target_date == datetime(2024, 12, 31)

    @pytest.mark.budgets
    def test_round_trip_through_to_dict(self):
        """Test to_dict output loads back to an equal budget."""
        goal = SavingsGoal(id="g1", name="Trip", target_amount=1000, amount_saved=10, target_date=datetime(2024, 6, 1))
        assert budget_from_dict(goal.to_dict()) == goal

    @pytest.mark.budgets
    @pytest.mark.parametrize(
        "record",
        [
            {"id": "x", "targetAmount": 100},
            {"id": "x", "type": "weekly", "targetAmount": 100},
            {"id": "x", "type": "monthly", "targetAmount": 100, "categories": ["Food"],
             "monthYear": "2024-03", "amountSaved": 10},
            {"id": "x", "type": "goal", "targetAmount": 100, "monthYear": "2024-03"},
        ],
        ids=["missing-type", "unknown-type", "monthly-with-goal-fields", "goal-with-monthly-fields"],
    )
    def test_invalid_records(self, record):
        """Test malformed or mixed records are configuration errors."""
        with pytest.raises(ConfigurationError):
            budget_from_dict(record)

    @pytest.mark.budgets
    def test_missing_target(self):
        """Test a record without a target amount is rejected."""
        with pytest.raises(ValidationError):
            budget_from_dict({"id": "x", "type": "goal"})
