#!/usr/bin/env python3
"""Tests for core currency utilities."""

from decimal import Decimal

import pytest

from household.core.currency import (
    cents_to_decimal,
    cents_to_dollars_str,
    format_cents,
    safe_ratio,
    to_decimal,
    value_to_cents,
)
from household.core.exceptions import PrecisionWarning, ValidationError


class TestCurrencyConversions:
    """Test core currency conversion functions."""

    @pytest.mark.currency
    def test_to_decimal_avoids_float_artifacts(self):
        """Test that floats convert through their shortest repr."""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal("$1,000.25") == Decimal("1000.25")

    @pytest.mark.currency
    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", None], ids=["text", "empty", "nan", "inf", "none"])
    def test_to_decimal_rejects_non_amounts(self, raw):
        """Test that non-finite or non-numeric values are rejected."""
        with pytest.raises(ValidationError):
            to_decimal(raw)

    @pytest.mark.currency
    def test_value_to_cents(self):
        """Test conversion of major units to cents."""
        assert value_to_cents("45.99") == 4599
        assert value_to_cents(0.1) == 10
        assert value_to_cents(-3) == -300

    @pytest.mark.currency
    def test_value_to_cents_rounds_half_even_with_warning(self):
        """Test banker's rounding of discarded sub-cent digits."""
        with pytest.warns(PrecisionWarning):
            assert value_to_cents("0.125") == 12
        with pytest.warns(PrecisionWarning):
            assert value_to_cents("0.135") == 14

    @pytest.mark.currency
    def test_cents_to_dollars_str(self):
        """Test formatting cents as dollar strings."""
        assert cents_to_dollars_str(4599) == "45.99"
        assert cents_to_dollars_str(100) == "1.00"
        assert cents_to_dollars_str(0) == "0.00"
        assert cents_to_dollars_str(5) == "0.05"
        assert cents_to_dollars_str(-4599) == "-45.99"

    @pytest.mark.currency
    def test_cents_to_decimal(self):
        """Test conversion of cents to Decimal major units."""
        assert cents_to_decimal(4599) == Decimal("45.99")
        assert cents_to_decimal(-1) == Decimal("-0.01")


class TestCurrencyFormatting:
    """Test display helpers."""

    @pytest.mark.currency
    def test_format_cents(self):
        """Test currency symbol placement."""
        assert format_cents(4599) == "$45.99"
        assert format_cents(-4599) == "-$45.99"
        assert format_cents(0) == "$0.00"

    def test_safe_ratio(self):
        """Test ratios with a zero denominator."""
        assert safe_ratio(25000, 20000) == 1.25
        assert safe_ratio(5, 0) == 0.0
