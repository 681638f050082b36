# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Output Formatting

This module contains unit tests for the conversion result line: rate
rendering, two-decimal amounts and input order preservation.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- usdnis.adapters.formatting.formatter (formatter functions for testing)
- usdnis.domain.models (Resolution for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Calendar dates for test data

from usdnis.adapters.formatting.formatter import (
    converted_amounts,  # Convert and format a list of amounts
    format_amount,  # Format a single amount
    format_conversion,  # Format the whole result line
    format_rate,  # Format the published rate
)
from usdnis.domain.models import Resolution  # Domain model for test data


def _resolution(rate=3.152, effective=date(2021, 12, 20), requested=date(2021, 12, 20)):
    return Resolution(rate=rate, effective_date=effective, requested_date=requested)


class TestFormatConversion:
    def test_single_amount(self):
        assert format_conversion(_resolution(), [100]) == "2021-12-20 (3.152): 315.20"

    def test_multiple_amounts_keep_order(self):
        assert format_conversion(_resolution(), [100, 10, 1]) == "2021-12-20 (3.152): 315.20 31.52 3.15"
        assert format_conversion(_resolution(), [1, 100]) == "2021-12-20 (3.152): 3.15 315.20"

    def test_shows_effective_date(self):
        result = format_conversion(
            _resolution(rate=3.115, effective=date(2021, 12, 17), requested=date(2021, 12, 19)),
            [100],
        )
        assert result == "2021-12-17 (3.115): 311.50"

    def test_negative_and_fractional_amounts(self):
        assert format_conversion(_resolution(), [-5, 0.5]) == "2021-12-20 (3.152): -15.76 1.58"

    def test_custom_decimals(self):
        assert format_conversion(_resolution(), [100], decimals=3) == "2021-12-20 (3.152): 315.200"


class TestHelpers:
    @pytest.mark.parametrize("rate,expected", [(3.152, "3.152"), (3.2, "3.2"), (3.0, "3.0")])
    def test_format_rate(self, rate, expected):
        assert format_rate(rate) == expected

    def test_format_amount(self):
        assert format_amount(315.20000000000005) == "315.20"
        assert format_amount(0) == "0.00"

    def test_converted_amounts(self):
        assert converted_amounts(3.152, [100, 10]) == ["315.20", "31.52"]
        assert converted_amounts(3.152, []) == []
