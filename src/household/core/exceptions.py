#!/usr/bin/env python3
"""
Error Taxonomy for the Household Ledger

All input validation happens synchronously when a record is constructed.
Aggregation and recurrence functions never raise on well-formed input.
"""


class HouseholdError(Exception):
    """Base class for all household ledger errors."""

    pass


class ValidationError(HouseholdError, ValueError):
    """Raised when a record is malformed (bad interval, negative amount, etc.)."""

    pass


class ConfigurationError(ValidationError):
    """Raised for invalid settings: a budget with missing or mixed kind fields, or a bad environment value."""

    pass


class ConflictError(HouseholdError):
    """
    Raised when a conditional update loses a race.

    The stored obligation is no longer the one the caller read, so another
    household member already advanced, honored or paused it. `expected` and
    `actual` are the obligation as read and as stored. Callers re-fetch and
    retry.
    """

    def __init__(self, obligation_id: str, expected: object, actual: object):
        self.obligation_id = obligation_id
        self.expected = expected
        self.actual = actual
        super().__init__(f"Obligation {obligation_id} changed concurrently since it was read")


class PrecisionWarning(UserWarning):
    """Advisory: a monetary conversion discarded precision beyond tolerance."""

    pass
