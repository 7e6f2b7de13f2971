"""Monetary amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from ..core.options import MoneyOptions
from ..core.types import KeyboardType, MaskType
from .base import BaseMask
from .template import only_digits


def group_thousands(integer: str, delimiter: str) -> str:
    """Insert `delimiter` every three digits counted from the right."""
    groups = []
    while len(integer) > 3:
        groups.append(integer[-3:])
        integer = integer[:-3]
    groups.append(integer)
    return delimiter.join(reversed(groups))


class MoneyMask(BaseMask):
    """
    Money mask: digits are right-aligned against a fixed precision.

    With the default options ``"123456"`` displays as ``"R$1.234,56"``.
    Leading zeros carry no value, so the raw value of ``"R$0,05"`` is ``"5"``
    and an all-zero amount reads back as ``"0"``. With `zero_cents` the raw
    digits are whole units and the fraction is always zeros.

    Numbers (``int``, ``float``, ``Decimal``) are accepted as input and
    rounded half-up to the precision before formatting.
    """

    mask_type = MaskType.MONEY
    keyboard_type = KeyboardType.DECIMAL
    options_model = MoneyOptions

    def _normalize(self, value: Any, options: MoneyOptions) -> str:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            try:
                amount = Decimal(str(value)).copy_abs()
            except InvalidOperation:
                return ""
            if not amount.is_finite():
                return ""
            if options.zero_cents:
                return str(int(amount))
            quantum = Decimal(1).scaleb(-options.precision)
            with localcontext() as ctx:
                ctx.prec = max(ctx.prec, amount.adjusted() + options.precision + 2)
                return format(amount.quantize(quantum, rounding=ROUND_HALF_UP), "f")
        return super()._normalize(value, options)

    def _get_value(self, value: str, options: MoneyOptions) -> str:
        digits = only_digits(value)
        if not digits:
            return ""

        precision = options.precision
        if options.zero_cents:
            integer = digits.lstrip("0") or "0"
            fraction = "0" * precision
        else:
            padded = digits.lstrip("0").rjust(precision + 1, "0")
            integer = padded[: len(padded) - precision]
            fraction = padded[len(padded) - precision :]

        number = group_thousands(integer, options.delimiter)
        if precision:
            number = f"{number}{options.separator}{fraction}"
        return f"{options.unit}{number}{options.suffix_unit}"

    def _get_raw_value(self, value: str, options: MoneyOptions) -> str:
        separator = options.separator
        if options.zero_cents and options.precision and separator and separator in value:
            value = value.rsplit(separator, 1)[0]
        digits = only_digits(value)
        if not digits:
            return ""
        return digits.lstrip("0") or "0"

    def _validate(self, value: str, options: MoneyOptions) -> bool:
        return bool(only_digits(value))

    def to_decimal(self, value: Any, options: Any = None) -> Decimal:
        """Read a display (or raw) value as an amount; empty reads as zero."""
        opts = self.options_model.coerce(options)
        raw = self.get_raw_value(value, opts) or "0"
        if opts.zero_cents:
            return Decimal(raw)
        return Decimal(raw).scaleb(-opts.precision)
