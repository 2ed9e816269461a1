"""Tests for currency and percent display formatters."""

from decimal import Decimal

import pytest

from corptax.formatting import format_currency, format_percent, parse_currency


class TestFormatCurrency:
    def test_grouping(self):
        assert format_currency(1234567) == "1,234,567"

    def test_rounds_to_whole_units(self):
        assert format_currency(1234.5) == "1,235"
        assert format_currency(Decimal("999.49")) == "999"

    def test_none_is_zero(self):
        assert format_currency(None) == "0"

    def test_negative(self):
        assert format_currency(Decimal("-1500")) == "-1,500"

    def test_small_negative_is_plain_zero(self):
        assert format_currency(-0.4) == "0"

    def test_string_amount(self):
        assert format_currency("40000.00") == "40,000"

    def test_large_amount(self):
        assert format_currency(Decimal("1e30")) == "1," + ",".join(["000"] * 10)

    @pytest.mark.parametrize("value", ["abc", "NaN"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            format_currency(value)


class TestFormatPercent:
    def test_two_decimals(self):
        assert format_percent("24") == "24.00%"

    def test_none(self):
        assert format_percent(None) == "0.00%"

    def test_rounds_half_up(self):
        assert format_percent(0.125) == "0.13%"

    def test_rejects_non_numbers(self):
        with pytest.raises(ValueError):
            format_percent("abc")


class TestParseCurrency:
    @pytest.mark.parametrize("amount", [0, 7, 999, 1000, 40000, 1234567, 9876543210, -1500])
    def test_round_trip(self, amount):
        assert parse_currency(format_currency(amount)) == amount

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_currency("NT$ lots")
