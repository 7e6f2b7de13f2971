"""Credit card numbers, grouped per card scheme."""

from __future__ import annotations

from typing import Optional

from ..core.options import CreditCardOptions
from ..core.types import CardIssuer, MaskType
from .base import TemplateMask
from .checksums import is_valid_luhn
from .template import Template, only_digits, parse_template

DEFAULT_PATTERN = "9999 9999 9999 9999"

ISSUER_PATTERNS: dict[CardIssuer, str] = {
    CardIssuer.VISA: DEFAULT_PATTERN,
    CardIssuer.MASTERCARD: DEFAULT_PATTERN,
    CardIssuer.VISA_OR_MASTERCARD: DEFAULT_PATTERN,
    CardIssuer.AMEX: "9999 999999 99999",
    CardIssuer.DINERS: "9999 999999 9999",
}

# Checked in order; longer prefixes of the same family come first.
_ISSUER_PREFIXES: tuple[tuple[CardIssuer, tuple[str, ...]], ...] = (
    (CardIssuer.AMEX, ("34", "37")),
    (CardIssuer.DINERS, ("300", "301", "302", "303", "304", "305", "36", "38")),
    (CardIssuer.VISA, ("4",)),
    (CardIssuer.MASTERCARD, ("51", "52", "53", "54", "55")),
)


def detect_issuer(digits: str) -> Optional[CardIssuer]:
    """Identify the card scheme from the leading digits, if known yet."""
    for issuer, prefixes in _ISSUER_PREFIXES:
        if digits.startswith(prefixes):
            return issuer
    if len(digits) >= 4 and 2221 <= int(digits[:4]) <= 2720:
        return CardIssuer.MASTERCARD
    return None


class CreditCardMask(TemplateMask):
    """
    Credit card mask whose grouping follows the detected scheme.

    Amex numbers format as ``9999 999999 99999`` and Diners as
    ``9999 999999 9999``; everything else, including prefixes that do not
    identify a scheme yet, uses four groups of four. The `issuer` option
    pins the scheme. With `luhn` set, `validate` also checks the Luhn digit.
    """

    mask_type = MaskType.CREDIT_CARD
    options_model = CreditCardOptions

    def _template(self, value: str, options: CreditCardOptions) -> Template:
        issuer = options.issuer or detect_issuer(only_digits(value))
        return parse_template(ISSUER_PATTERNS.get(issuer, DEFAULT_PATTERN))

    def _validate(self, value: str, options: CreditCardOptions) -> bool:
        result = self._template(value, options).scan(value)
        if not result.complete:
            return False
        return not options.luhn or is_valid_luhn(result.raw)
