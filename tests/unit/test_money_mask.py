"""Tests for the money mask."""

from decimal import Decimal

import pytest

from textmask.core.types import KeyboardType, MaskType
from textmask.masks import MoneyMask
from textmask.masks.money import group_thousands

pytestmark = pytest.mark.unit


USD = {"unit": "$", "separator": ".", "delimiter": ","}


@pytest.fixture
def money() -> MoneyMask:
    return MoneyMask()


def test_group_thousands() -> None:
    """Test grouping digits from the right."""
    assert group_thousands("1", ".") == "1"
    assert group_thousands("123", ".") == "123"
    assert group_thousands("1234", ".") == "1.234"
    assert group_thousands("1234567", ",") == "1,234,567"
    assert group_thousands("1234", "") == "1234"


class TestMoneyFormatting:
    """Test formatting digit strings."""

    def test_metadata(self, money: MoneyMask) -> None:
        """Test type and keyboard metadata."""
        assert money.get_type() == MaskType.MONEY
        assert money.get_keyboard_type() == KeyboardType.DECIMAL

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("123456", "R$1.234,56"),
            ("5", "R$0,05"),
            ("50", "R$0,50"),
            ("100", "R$1,00"),
            ("0", "R$0,00"),
            ("000123", "R$1,23"),
            ("100000000", "R$1.000.000,00"),
        ],
    )
    def test_default_options(self, money: MoneyMask, raw: str, expected: str) -> None:
        """Test the default currency layout."""
        assert money.get_value(raw) == expected

    def test_us_dollars(self, money: MoneyMask) -> None:
        """Test a dollar layout."""
        assert money.get_value("123456", USD) == "$1,234.56"

    def test_suffix_unit(self, money: MoneyMask) -> None:
        """Test a unit printed after the amount."""
        options = {"unit": "", "suffixUnit": " EUR"}
        assert money.get_value("123456", options) == "1.234,56 EUR"

    def test_precision(self, money: MoneyMask) -> None:
        """Test other precisions."""
        assert money.get_value("123456", {"precision": 0}) == "R$123.456"
        assert money.get_value("1234", {"precision": 3}) == "R$1,234"

    def test_zero_cents(self, money: MoneyMask) -> None:
        """Test whole-unit input with a fixed zero fraction."""
        assert money.get_value("1234", {"zeroCents": True}) == "R$1.234,00"
        assert money.get_value("0", {"zero_cents": True}) == "R$0,00"

    def test_formatted_input_reformats(self, money: MoneyMask) -> None:
        """Test that a display value formats to itself."""
        assert money.get_value("R$1.234,56") == "R$1.234,56"

    def test_text_without_digits(self, money: MoneyMask) -> None:
        """Test that text without digits formats to nothing."""
        assert money.get_value("R$") == ""
        assert money.get_value("") == ""
        assert money.get_value(None) == ""


class TestMoneyNumericInput:
    """Test numbers as input."""

    def test_int(self, money: MoneyMask) -> None:
        """Test integers are whole units."""
        assert money.get_value(1234) == "R$1.234,00"

    def test_float(self, money: MoneyMask) -> None:
        """Test floats are padded to the precision."""
        assert money.get_value(1234.5) == "R$1.234,50"

    def test_decimal_rounds_half_up(self, money: MoneyMask) -> None:
        """Test half-up rounding to the precision."""
        assert money.get_value(Decimal("0.005")) == "R$0,01"
        assert money.get_value(Decimal("2.344")) == "R$2,34"

    def test_negative_uses_magnitude(self, money: MoneyMask) -> None:
        """Test that signs are not represented."""
        assert money.get_value(-12.5) == "R$12,50"

    def test_large_amounts_keep_every_digit(self, money: MoneyMask) -> None:
        """Test amounts wider than the default decimal precision."""
        amount = 10**40 + 1

        assert money.get_raw_value(money.get_value(amount)) == f"{amount}00"
        assert money.get_value(1e30).endswith(",00")

    def test_non_finite(self, money: MoneyMask) -> None:
        """Test that NaN and infinity format to nothing."""
        assert money.get_value(float("nan")) == ""
        assert money.get_value(float("inf")) == ""

    def test_zero_cents_truncates(self, money: MoneyMask) -> None:
        """Test numbers with zero cents keep whole units."""
        assert money.get_value(1234.99, {"zeroCents": True}) == "R$1.234,00"

    def test_bool_is_text(self, money: MoneyMask) -> None:
        """Test that booleans are not treated as amounts."""
        assert money.get_value(True) == ""


class TestMoneyRawValue:
    """Test recovering digits."""

    def test_raw_value(self, money: MoneyMask) -> None:
        """Test raw digits of display values."""
        assert money.get_raw_value("R$1.234,56") == "123456"
        assert money.get_raw_value("$1,234.56", USD) == "123456"

    def test_leading_zeros_stripped(self, money: MoneyMask) -> None:
        """Test that the raw value carries no leading zeros."""
        assert money.get_raw_value("R$0,05") == "5"
        assert money.get_raw_value("R$0,00") == "0"

    def test_zero_cents_drops_fraction(self, money: MoneyMask) -> None:
        """Test that zero cents reads whole units only."""
        assert money.get_raw_value("R$1.234,00", {"zeroCents": True}) == "1234"

    def test_no_digits(self, money: MoneyMask) -> None:
        """Test text without digits."""
        assert money.get_raw_value("R$") == ""

    def test_validate(self, money: MoneyMask) -> None:
        """Test that any digit makes an amount."""
        assert money.validate("5") is True
        assert money.validate("R$0,00") is True
        assert money.validate("R$") is False
        assert money.validate(None) is False


class TestMoneyToDecimal:
    """Test reading amounts back."""

    def test_to_decimal(self, money: MoneyMask) -> None:
        """Test display values as amounts."""
        assert money.to_decimal("R$1.234,56") == Decimal("1234.56")
        assert money.to_decimal("$0.05", USD) == Decimal("0.05")

    def test_empty_is_zero(self, money: MoneyMask) -> None:
        """Test that empty input reads as zero."""
        assert money.to_decimal("") == Decimal("0")

    def test_zero_cents(self, money: MoneyMask) -> None:
        """Test whole units with zero cents."""
        assert money.to_decimal("R$1.234,00", {"zeroCents": True}) == Decimal("1234")


class TestMoneyOptionCoercion:
    """Test invalid option values."""

    def test_invalid_precision_uses_default(self, money: MoneyMask) -> None:
        """Test that an out-of-range precision is ignored."""
        assert money.get_value("123456", {"precision": -1}) == "R$1.234,56"
        assert money.get_value("123456", {"precision": "many"}) == "R$1.234,56"

    def test_invalid_key_keeps_valid_keys(self, money: MoneyMask) -> None:
        """Test that dropping one option keeps the others."""
        options = {"precision": 99, "unit": "$"}
        assert money.get_value("123456", options) == "$1.234,56"

    def test_unknown_keys_ignored(self, money: MoneyMask) -> None:
        """Test that unrelated keys do not matter."""
        assert money.get_value("100", {"mask": "999"}) == "R$1,00"
