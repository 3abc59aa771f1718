"""
Core Utilities Package

Shared building blocks used by every household domain.

This package provides:
- Money and currency conversion on integer cents
- Calendar helpers: month keys, Monday-to-Sunday weeks, inclusive ranges
- The realized MonetaryEntry record
- Configuration from the environment and the error taxonomy
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import cents_to_dollars_str, format_cents, safe_ratio, to_decimal, value_to_cents
from .dates import (
    DateRange,
    add_months,
    add_years,
    end_of_day,
    month_key,
    month_range,
    parse_month_key,
    previous_month_key,
    shift_month_key,
    start_of_day,
    week_range,
)
from .exceptions import ConfigurationError, ConflictError, HouseholdError, PrecisionWarning, ValidationError
from .models import EntryType, MonetaryEntry
from .money import Money, sum_money

__all__ = [
    "Config",
    "ConfigurationError",
    "ConflictError",
    "DateRange",
    "EntryType",
    "Environment",
    "HouseholdError",
    "MonetaryEntry",
    "Money",
    "PrecisionWarning",
    "ValidationError",
    "add_months",
    "add_years",
    "cents_to_dollars_str",
    "end_of_day",
    "format_cents",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "month_key",
    "month_range",
    "parse_month_key",
    "previous_month_key",
    "reload_config",
    "safe_ratio",
    "shift_month_key",
    "start_of_day",
    "sum_money",
    "to_decimal",
    "value_to_cents",
    "week_range",
]
