"""
Tests for Indian number and currency formatting.
"""

import pytest

from moneymap.formatting import (
    group_indian,
    format_number,
    format_currency,
    format_percentage,
    format_compact_currency,
    parse_formatted_number,
)


class TestGrouping:
    """Test lakh/crore digit grouping."""

    @pytest.mark.parametrize(
        "digits,expected",
        [
            ("0", "0"),
            ("999", "999"),
            ("1000", "1,000"),
            ("100000", "1,00,000"),
            ("1234567", "12,34,567"),
            ("123456789", "12,34,56,789"),
        ],
    )
    def test_group_indian(self, digits, expected):
        assert group_indian(digits) == expected

    def test_format_number_decimals(self):
        assert format_number(1234567.125) == "12,34,567.125"
        assert format_number(1500.5) == "1,500.5"
        assert format_number(2000) == "2,000"

    def test_format_number_negative(self):
        assert format_number(-100000) == "-1,00,000"


class TestCurrency:
    """Test currency formatting."""

    def test_rupees(self):
        assert format_currency(1234567) == "₹12,34,567"

    def test_rounds_to_whole_units(self):
        assert format_currency(9846.52) == "₹9,847"

    def test_rounds_half_away_from_zero(self):
        """Half units round away from zero."""
        assert format_currency(2.5) == "₹3"
        assert format_currency(46609.5) == "₹46,610"
        assert format_currency(-2.5) == "-₹3"

    def test_negative_rounding_to_zero_has_no_sign(self):
        assert format_currency(-0.4) == "₹0"

    def test_other_currency(self):
        assert format_currency(1000, "USD") == "$1,000"

    def test_negative(self):
        assert format_currency(-500) == "-₹500"

    def test_compact(self):
        assert format_compact_currency(25000000) == "₹2.5Cr"
        assert format_compact_currency(250000) == "₹2.5L"
        assert format_compact_currency(2500) == "₹2.5K"
        assert format_compact_currency(250) == "₹250"

    def test_percentage(self):
        assert format_percentage(12.345) == "12.3%"
        assert format_percentage(7.5, 2) == "7.50%"

    def test_parse_round_trip(self):
        assert parse_formatted_number("₹12,34,567.50") == 1234567.5

    def test_parse_reads_leading_number(self):
        """Trailing junk after a number is ignored."""
        assert parse_formatted_number("12.5.3") == 12.5
        assert parse_formatted_number("-₹500") == -500
        assert parse_formatted_number("₹2.5L") == 2.5

    def test_parse_garbage(self):
        assert parse_formatted_number("n/a") == 0.0
