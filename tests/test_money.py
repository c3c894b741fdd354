"""
Tests for money utilities
"""

from decimal import Decimal

from cartstore.services.money import (
    add,
    compare,
    format_money,
    multiply,
    round_money,
    subtract,
    to_decimal,
)


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_keeps_short_repr(self):
        """Test floats convert through their short repr."""
        assert to_decimal(0.3) == Decimal("0.3")

    def test_none_and_invalid(self):
        """Test None and invalid input become zero."""
        assert to_decimal(None) == 0
        assert to_decimal("not a number") == 0
        assert to_decimal(object()) == 0

    def test_non_finite_values(self):
        """Test NaN and Infinity become zero."""
        assert to_decimal(float("nan")) == 0
        assert to_decimal("Infinity") == 0

    def test_decimal_passthrough(self):
        """Test Decimal input is returned as-is."""
        value = Decimal("1.23")
        assert to_decimal(value) is value


class TestArithmetic:
    """Tests for arithmetic helpers."""

    def test_add_avoids_float_drift(self):
        """Test add avoids float drift."""
        assert add(0.1, 0.2) == Decimal("0.3")

    def test_subtract(self):
        """Test subtract."""
        assert subtract(2, "2.5") == Decimal("-0.5")

    def test_multiply(self):
        """Test multiply."""
        assert multiply("0.30", 3) == Decimal("0.90")

    def test_round_money(self):
        """Test half-up rounding to cents and integers."""
        assert round_money("2.345") == Decimal("2.35")
        assert round_money("2.5", to_int=True) == Decimal("3")

    def test_compare(self):
        """Test three-way comparison."""
        assert compare(1, 2) == -1
        assert compare("2.50", 2.5) == 0
        assert compare(3, 2) == 1


class TestFormatMoney:
    """Tests for format_money."""

    def test_usd(self):
        """Test USD formatting with thousands separator."""
        assert format_money(Decimal("1234.5")) == "$1,234.50"

    def test_negative(self):
        """Test sign goes before the symbol."""
        assert format_money(Decimal("-0.5"), "USD") == "-$0.50"

    def test_integer_currency(self):
        """Test integer currency."""
        assert format_money(1234.4, "JPY") == "¥1,234"

    def test_unknown_currency(self):
        """Test unknown currency."""
        assert format_money(2, "CHF") == "2.00 CHF"
