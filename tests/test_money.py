"""
Test suite for money helpers

Tests Decimal coercion, fractional digit counting, display formatting
and parsing of user-typed amounts.
"""

import pytest
from decimal import Decimal

from student_accounts.money import (
    to_decimal, fractional_digits, has_valid_precision, quantize_cents,
    format_amount, decimal_from_string
)


class TestToDecimal:
    """Test conversion of caller-supplied amounts"""

    def test_decimal_passthrough(self):
        value = Decimal('12.345')
        assert to_decimal(value) is value

    def test_int_and_float(self):
        assert to_decimal(5) == Decimal('5')
        # Floats go through str() so 0.1 stays 0.1
        assert to_decimal(0.1) == Decimal('0.1')
        assert to_decimal(100.25) == Decimal('100.25')

    def test_string(self):
        assert to_decimal(" 42.50 ") == Decimal('42.50')

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            to_decimal(False)

    def test_rejects_unsupported_type(self):
        with pytest.raises(TypeError, match="Unsupported amount type"):
            to_decimal([1])

    def test_rejects_non_numeric_string(self):
        with pytest.raises(ValueError, match="Cannot convert"):
            to_decimal("abc")


class TestPrecision:
    """Test fractional digit checks"""

    @pytest.mark.parametrize("text,expected", [
        ("100", 0),
        ("100.1", 1),
        ("100.10", 1),
        ("100.12", 2),
        ("100.123", 3),
        ("1E+3", 0),
        ("0.000", 0),
        ("1E-5", 5),
    ])
    def test_fractional_digits(self, text, expected):
        assert fractional_digits(Decimal(text)) == expected

    def test_has_valid_precision(self):
        assert has_valid_precision(Decimal('100'))
        assert has_valid_precision(Decimal('100.1'))
        assert has_valid_precision(Decimal('100.12'))
        assert not has_valid_precision(Decimal('100.123'))
        assert has_valid_precision(Decimal('7.5'), places=1)
        assert not has_valid_precision(Decimal('7.55'), places=1)

    def test_quantize_cents(self):
        assert str(quantize_cents(Decimal('5'))) == "5.00"
        assert str(quantize_cents(Decimal('5.1'))) == "5.10"


class TestFormatAmount:
    """Test display formatting"""

    def test_two_decimal_places(self):
        assert format_amount(Decimal('1000')) == "1000.00"
        assert format_amount(Decimal('0')) == "0.00"
        assert format_amount(Decimal('999999.99')) == "999999.99"
        assert format_amount(Decimal('12.5')) == "12.50"


class TestDecimalFromString:
    """Test parsing of typed amounts"""

    @pytest.mark.parametrize("text,expected", [
        ("250", Decimal('250')),
        ("250.00", Decimal('250.00')),
        ("  12.5  ", Decimal('12.5')),
        ("$1,250.75", Decimal('1250.75')),
        (".5", Decimal('0.5')),
        ("-3", Decimal('-3')),
        ("1e2", Decimal('100')),
    ])
    def test_valid_input(self, text, expected):
        assert decimal_from_string(text) == expected

    def test_keeps_extra_digits_for_validation(self):
        # Precision is the ledger's call, not the parser's
        assert decimal_from_string("100.123") == Decimal('100.123')

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "1.2.3", "NaN", "Infinity", "$", "--1"])
    def test_invalid_input(self, text):
        with pytest.raises(ValueError):
            decimal_from_string(text)

    def test_rejects_non_string(self):
        with pytest.raises(ValueError, match="non-empty string"):
            decimal_from_string(None)
