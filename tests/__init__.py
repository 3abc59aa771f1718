"""
Test Suite for the Household Ledger

Test Structure:
- unit/: Unit tests mirroring the src/household package structure
- integration/: Configuration loading and CLI commands run against snapshot files

Test Categories:
- Core utilities (money, currency, dates, models, snapshots)
- Recurring obligation scheduling
- Ledger aggregation, history and insights
- Budgets and savings goals
- Shopping lists and inventory

Test Data:
All test data is synthetic. Every test that depends on the current time
passes it explicitly.
"""
