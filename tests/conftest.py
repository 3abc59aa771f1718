"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from household.core import config as config_module
from household.core.models import EntryType, MonetaryEntry
from household.core.money import Money


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


def make_entry(
    entry_id: str,
    cents: int,
    entry_type: str,
    when: datetime,
    category: str = "Groceries",
) -> MonetaryEntry:
    """Build a MonetaryEntry from integer cents."""
    return MonetaryEntry(
        id=entry_id,
        value=Money.from_cents(cents),
        type=EntryType(entry_type),
        category=category,
        date=when,
        group_id="group-1",
    )


@pytest.fixture
def entry_factory():
    """Factory for MonetaryEntry records from integer cents."""
    return make_entry


@pytest.fixture
def march_entries() -> list[MonetaryEntry]:
    """Income 100, expense 40 in March 2024, plus entries just outside the month."""
    return [
        make_entry("salary", 10000, "income", datetime(2024, 3, 1, 9, 0), category="Salary"),
        make_entry("groceries", 4000, "expense", datetime(2024, 3, 31, 23, 59, 59)),
        make_entry("february", 2500, "expense", datetime(2024, 2, 29, 23, 59, 59)),
        make_entry("april", 1500, "income", datetime(2024, 4, 1, 0, 0), category="Salary"),
    ]


@pytest.fixture
def sample_snapshot_data() -> dict[str, Any]:
    """A household snapshot document as exported from the document store."""
    return {
        "groupId": "group-1",
        "transactions": [
            {"id": "t1", "value": 100, "type": "income", "category": "Salary",
             "date": "2024-03-01T09:00:00", "groupId": "group-1", "userId": "alice"},
            {"id": "t2", "value": 40, "type": "expense", "category": "Groceries",
             "date": "2024-03-10T18:30:00", "groupId": "group-1", "userId": "bob"},
            {"id": "t3", "value": 210, "type": "expense", "category": "Dining",
             "date": "2024-03-16T20:00:00", "groupId": "group-1", "userId": "alice"},
            {"id": "t4", "value": 25.5, "type": "expense", "category": "Groceries",
             "date": "2024-02-12T12:00:00", "groupId": "group-1", "userId": "bob"},
        ],
        "recurring": [
            {"id": "rent", "name": "Rent", "amount": 1200, "type": "expense", "category": "Housing",
             "frequency": "monthly", "interval": 1, "nextDueDate": "2024-03-05T00:00:00", "isActive": True},
            {"id": "salary", "name": "Salary", "amount": 3000, "type": "income", "category": "Salary",
             "frequency": "monthly", "interval": 1, "nextDueDate": "2024-03-25T00:00:00", "isActive": True},
            {"id": "gym", "name": "Gym", "amount": 45, "type": "expense", "category": "Health",
             "frequency": "monthly", "interval": 1, "nextDueDate": "2024-03-18T00:00:00", "isActive": False},
        ],
        "budgets": [
            {"id": "b1", "name": "Eating out", "type": "monthly", "targetAmount": 200,
             "categories": ["Dining"], "monthYear": "2024-03"},
            {"id": "b2", "name": "Groceries", "type": "monthly", "targetAmount": 400,
             "categories": ["Groceries"], "monthYear": "2024-03"},
            {"id": "g1", "name": "Vacation", "type": "goal", "targetAmount": 1000,
             "amountSaved": 250, "targetDate": "2024-12-31T00:00:00"},
        ],
        "shoppingItems": [
            {"id": "milk", "name": "Milk", "quantity": 2, "unit": "L", "estimatedValue": 3.5,
             "isBought": True, "category": "Groceries"},
            {"id": "bread", "name": "Bread", "quantity": 1, "unit": "un", "estimatedValue": 4,
             "isBought": False, "category": "Groceries"},
            {"id": "soap", "name": "Soap", "quantity": 3, "unit": "un", "isBought": False},
        ],
        "inventory": [
            {"id": "inv-coffee", "name": "Coffee", "quantity": 1, "unit": "kg",
             "purchases": [
                 {"date": "2024-02-01T10:00:00", "quantity": 1, "value": 18},
                 {"date": "2024-02-15T10:00:00", "quantity": 1, "value": 19},
                 {"date": "2024-03-01T10:00:00", "quantity": 1, "value": 20},
             ]},
            {"id": "inv-rice", "name": "Rice", "quantity": 5, "unit": "kg",
             "lastPurchaseDate": "2024-02-20T10:00:00", "lastPurchaseQuantity": 5,
             "lastPurchaseValue": 12, "estimatedValue": 11},
        ],
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't use real household data
    monkeypatch.setenv("HOUSEHOLD_ENV", "test")
    monkeypatch.setenv("HOUSEHOLD_DATA_DIR", str(tmp_path / "household_data"))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEBUG", "false")
    for name in (
        "BUDGET_WARNING_THRESHOLD",
        "UPCOMING_DAYS_AHEAD",
        "PRECISION_TOLERANCE_CENTS",
        "HISTORY_MONTHS",
    ):
        monkeypatch.delenv(name, raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "recurring: Tests for recurring obligation scheduling")
    config.addinivalue_line("markers", "ledger: Tests for ledger aggregation and insights")
    config.addinivalue_line("markers", "budgets: Tests for budget and goal tracking")
    config.addinivalue_line("markers", "shopping: Tests for shopping lists and check-off")
    config.addinivalue_line("markers", "inventory: Tests for pantry inventory and purchase cadence")
    config.addinivalue_line("markers", "slow: Tests that take significant time to run")
