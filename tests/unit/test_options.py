"""Tests for options coercion."""

import pytest
from pydantic import BaseModel, ValidationError

from textmask.core.options import (
    CelPhoneOptions,
    CreditCardOptions,
    CustomOptions,
    DateTimeOptions,
    MaskOptions,
    MoneyOptions,
)
from textmask.core.types import CardIssuer, PlaceholderClass


pytestmark = pytest.mark.unit


class TestCoerce:
    """Test building options from arbitrary input."""

    @pytest.mark.parametrize("options", [None, "mask", 42, ["mask"]])
    def test_non_mapping_gives_defaults(self, options) -> None:
        """Test that anything but a mapping means defaults."""
        assert MoneyOptions.coerce(options) == MoneyOptions()

    def test_instance_returned_unchanged(self) -> None:
        """Test that a model of the right type is used as is."""
        options = MoneyOptions(unit="$")
        assert MoneyOptions.coerce(options) is options

    def test_other_model_is_dumped(self) -> None:
        """Test that a foreign model contributes its fields."""

        class Foreign(BaseModel):
            unit: str = "$"
            other: int = 1

        assert MoneyOptions.coerce(Foreign()).unit == "$"

    def test_unknown_keys_ignored(self) -> None:
        """Test that extra keys are dropped silently."""
        options = CustomOptions.coerce({"mask": "999", "colour": "red"})

        assert options.mask == "999"
        assert not hasattr(options, "colour")

    def test_camel_case_aliases(self) -> None:
        """Test form-library spellings of option names."""
        money = MoneyOptions.coerce({"suffixUnit": " BRL", "zeroCents": True})
        phone = CelPhoneOptions.coerce({"withDDD": False, "dddMask": "99 "})

        assert money.suffix_unit == " BRL"
        assert money.zero_cents is True
        assert phone.with_ddd is False
        assert phone.ddd_mask == "99 "

    def test_field_names_accepted(self) -> None:
        """Test snake_case names."""
        assert MoneyOptions.coerce({"suffix_unit": "!"}).suffix_unit == "!"

    def test_string_values_converted(self) -> None:
        """Test lax conversion of strings from config files and the shell."""
        options = MoneyOptions.coerce({"precision": "3", "zeroCents": "true"})

        assert options.precision == 3
        assert options.zero_cents is True

    def test_invalid_value_dropped(self) -> None:
        """Test that only the failing key reverts to its default."""
        options = MoneyOptions.coerce({"precision": 42, "unit": "$"})

        assert options.precision == 2
        assert options.unit == "$"

    def test_invalid_alias_value_dropped(self) -> None:
        """Test dropping a key given by its alias."""
        options = CelPhoneOptions.coerce({"withDDD": "maybe", "dddMask": "99 "})

        assert options.with_ddd is True
        assert options.ddd_mask == "99 "

    def test_invalid_value_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that dropped keys are reported."""
        with caplog.at_level("WARNING"):
            CreditCardOptions.coerce({"issuer": "discover"})

        assert "Ignoring invalid mask options" in caplog.text

    def test_options_are_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = DateTimeOptions()
        with pytest.raises(ValidationError):
            options.format = "YYYY"  # type: ignore[misc]

    def test_base_options(self) -> None:
        """Test that the shared base accepts anything."""
        assert MaskOptions.coerce({"anything": 1}) == MaskOptions()


class TestOptionModels:
    """Test defaults and enum conversion."""

    def test_money_defaults(self) -> None:
        """Test default money layout."""
        options = MoneyOptions()

        assert options.precision == 2
        assert options.separator == ","
        assert options.delimiter == "."
        assert options.unit == "R$"
        assert options.suffix_unit == ""
        assert options.zero_cents is False

    def test_datetime_default(self) -> None:
        """Test the default format."""
        assert DateTimeOptions().format == "DD/MM/YYYY HH:mm:ss"

    def test_issuer_from_string(self) -> None:
        """Test card scheme names."""
        assert CreditCardOptions.coerce({"issuer": "amex"}).issuer == CardIssuer.AMEX

    def test_translation_from_strings(self) -> None:
        """Test placeholder classes named by string."""
        options = CustomOptions.coerce({"translation": {"#": "digit", "@": "letter"}})

        assert options.translation == {
            "#": PlaceholderClass.DIGIT,
            "@": PlaceholderClass.LETTER,
        }
