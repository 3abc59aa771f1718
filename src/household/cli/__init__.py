"""
Command Line Interface Package

Unified CLI for the household ledger.

Command Structure:
- household: Main entry point with utility commands (version, config)
- household ledger: summary, history, insights
- household budgets: status
- household recurring: list, upcoming, honor, pause, resume
- household shopping: summary, check
- household inventory: forecast

Every command reads a snapshot file (--snapshot, JSON or YAML) and accepts
--now to fix the current instant.
"""
