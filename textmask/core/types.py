"""Enumerations shared by the mask handlers and the registry."""

from __future__ import annotations

import string
from enum import Enum


class MaskType(str, Enum):
    """Identifiers claimed by the built-in mask handlers."""

    CUSTOM = "custom"
    CREDIT_CARD = "credit-card"
    CPF = "cpf"
    CNPJ = "cnpj"
    MONEY = "money"
    DATETIME = "datetime"
    ONLY_NUMBERS = "only-numbers"
    CEL_PHONE = "cel-phone"
    ZIP_CODE = "zip-code"
    NONE = "none"


class KeyboardType(str, Enum):
    """Preferred input character class, advisory only."""

    NUMERIC = "numeric"
    TEXT = "text"
    DECIMAL = "decimal"
    DATETIME = "datetime"


class PlaceholderClass(str, Enum):
    """Character classes a template placeholder can accept."""

    DIGIT = "digit"
    LETTER = "letter"
    ALNUM = "alnum"
    ANY = "any"

    def accepts(self, char: str) -> bool:
        """Check whether a single character satisfies this class."""
        if self is PlaceholderClass.DIGIT:
            return char in string.digits
        if self is PlaceholderClass.LETTER:
            return char.isalpha()
        if self is PlaceholderClass.ALNUM:
            return char.isalpha() or char in string.digits
        return True


class CardIssuer(str, Enum):
    """Credit card schemes with their own digit grouping."""

    VISA = "visa"
    MASTERCARD = "mastercard"
    VISA_OR_MASTERCARD = "visa-or-mastercard"
    AMEX = "amex"
    DINERS = "diners"
