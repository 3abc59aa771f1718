#!/usr/bin/env python3
"""Tests for ledger aggregation."""

import random
from datetime import date, datetime

import pytest

from household.core.dates import DateRange, month_range, week_range
from household.core.models import MonetaryEntry
from household.core.money import Money
from household.ledger import (
    FinancialSummary,
    dashboard,
    entries_in_range,
    spending_by_category,
    summarize,
    summarize_month,
    summarize_week,
)


class TestSummarize:
    """Test period summaries."""

    @pytest.mark.ledger
    def test_march_summary(self, march_entries):
        """Test income 100 and expense 40 in March give balance 60."""
        summary = summarize_month(march_entries, "2024-03")

        assert summary.income == Money.from_cents(10000)
        assert summary.expenses == Money.from_cents(4000)
        assert summary.balance == Money.from_cents(6000)

    @pytest.mark.ledger
    def test_empty_input_is_all_zero(self):
        """Test no entries gives a zero summary."""
        summary = summarize([], month_range("2024-03"))
        assert summary == FinancialSummary()
        assert summary.balance == Money.zero()

    @pytest.mark.ledger
    def test_bounds_are_inclusive(self, entry_factory):
        """Test entries exactly on either bound are counted."""
        entries = [
            entry_factory("start", 100, "expense", datetime(2024, 3, 1)),
            entry_factory("end", 200, "expense", datetime(2024, 3, 10)),
            entry_factory("after", 400, "expense", datetime(2024, 3, 10, 0, 0, 1)),
        ]
        summary = summarize(entries, (date(2024, 3, 1), datetime(2024, 3, 10)))
        assert summary.expenses == Money.from_cents(300)

    @pytest.mark.ledger
    def test_order_independent(self, entry_factory):
        """Test shuffling entries does not change the result."""
        entries = [
            entry_factory(f"e{i}", 10 + i, "expense" if i % 3 else "income", datetime(2024, 3, 1 + i % 28))
            for i in range(60)
        ]
        expected = summarize(entries, month_range("2024-03"))

        shuffled = list(entries)
        random.Random(7).shuffle(shuffled)
        assert summarize(shuffled, month_range("2024-03")) == expected

    @pytest.mark.ledger
    def test_disjoint_ranges_add_up(self, march_entries):
        """Test summaries of adjacent months add to the summary of both."""
        feb = summarize_month(march_entries, "2024-02")
        mar = summarize_month(march_entries, "2024-03")
        both = summarize(march_entries, DateRange(start=datetime(2024, 2, 1), end=month_range("2024-03").end))
        assert feb + mar == both

    @pytest.mark.ledger
    def test_tenths_accumulate_exactly(self):
        """Test many small values sum without drift."""
        entries = [
            MonetaryEntry(id=f"c{i}", value=0.1, type="expense", category="Coffee", date=datetime(2024, 3, 5))
            for i in range(1000)
        ]
        assert summarize_month(entries, "2024-03").expenses == Money.from_cents(10000)

    @pytest.mark.ledger
    def test_input_not_modified(self, march_entries):
        """Test the caller's list is left untouched."""
        before = list(march_entries)
        summarize_month(march_entries, "2024-03")
        assert march_entries == before

    @pytest.mark.ledger
    def test_to_dict(self):
        """Test display serialization."""
        summary = FinancialSummary(income=Money.from_cents(10000), expenses=Money.from_cents(4000))
        assert summary.to_dict() == {"income": "100.00", "expenses": "40.00", "balance": "60.00"}


class TestWeeksAndDashboard:
    """Test week summaries and the dashboard cards."""

    @pytest.mark.ledger
    def test_sunday_entry_counts_in_its_week(self, entry_factory):
        """Test a Sunday-evening expense belongs to the week ending that Sunday."""
        sunday = datetime(2024, 3, 17, 21, 0)
        entries = [entry_factory("sun", 500, "expense", sunday)]

        assert summarize_week(entries, datetime(2024, 3, 13)).expenses == Money.from_cents(500)
        assert summarize_week(entries, datetime(2024, 3, 18)).expenses == Money.zero()

    @pytest.mark.ledger
    def test_dashboard(self, entry_factory):
        """Test month and week cards come from one snapshot."""
        now = datetime(2024, 3, 14, 9, 0)
        entries = [
            entry_factory("early-march", 1000, "expense", datetime(2024, 3, 2)),
            entry_factory("this-week", 300, "expense", datetime(2024, 3, 12)),
            entry_factory("pay", 5000, "income", datetime(2024, 3, 11)),
            entry_factory("feb", 999, "expense", datetime(2024, 2, 28)),
        ]

        cards = dashboard(entries, now)

        assert cards.month_key == "2024-03"
        assert cards.month.expenses == Money.from_cents(1300)
        assert cards.month.income == Money.from_cents(5000)
        assert cards.week_range == week_range(now)
        assert cards.week.expenses == Money.from_cents(300)
        assert cards.week.balance == Money.from_cents(4700)

    @pytest.mark.ledger
    def test_dashboard_accepts_generator(self, entry_factory):
        """Test a one-shot iterable feeds both cards."""
        now = datetime(2024, 3, 14)
        entries = (entry_factory(f"e{i}", 100, "expense", datetime(2024, 3, 12)) for i in range(3))
        cards = dashboard(entries, now)
        assert cards.month.expenses == cards.week.expenses == Money.from_cents(300)


class TestCategories:
    """Test per-category totals."""

    @pytest.mark.ledger
    def test_spending_by_category_ignores_income(self, entry_factory):
        """Test only expenses are grouped."""
        entries = [
            entry_factory("a", 1000, "expense", datetime(2024, 3, 2), category="Groceries"),
            entry_factory("b", 250, "expense", datetime(2024, 3, 3), category="Groceries"),
            entry_factory("c", 700, "expense", datetime(2024, 3, 4), category="Dining"),
            entry_factory("d", 9000, "income", datetime(2024, 3, 5), category="Salary"),
        ]
        assert spending_by_category(entries) == {
            "Groceries": Money.from_cents(1250),
            "Dining": Money.from_cents(700),
        }

    @pytest.mark.ledger
    def test_spending_by_category_within_period(self, march_entries):
        """Test the period restricts which expenses count."""
        assert spending_by_category(march_entries, month_range("2024-02")) == {"Groceries": Money.from_cents(2500)}

    @pytest.mark.ledger
    def test_entries_in_range(self, march_entries):
        """Test filtering by range."""
        assert [e.id for e in entries_in_range(march_entries, month_range("2024-03"))] == ["salary", "groceries"]
