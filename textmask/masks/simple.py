"""Masks with trivial layouts: digits only, zip codes and passthrough."""

from typing import Any

from ..core.types import KeyboardType, MaskType
from .base import BaseMask, TemplateMask
from .template import only_digits


class OnlyNumbersMask(BaseMask):
    """Keeps digits and drops everything else; no length limit."""

    mask_type = MaskType.ONLY_NUMBERS

    def _get_value(self, value: str, options: Any) -> str:
        return only_digits(value)

    def _get_raw_value(self, value: str, options: Any) -> str:
        return only_digits(value)

    def _validate(self, value: str, options: Any) -> bool:
        return bool(only_digits(value))


class ZipCodeMask(TemplateMask):
    """Brazilian CEP, ``99999-999``."""

    mask_type = MaskType.ZIP_CODE
    pattern = "99999-999"


class PassthroughMask(BaseMask):
    """Identity mask used for ``none`` and for any unknown type."""

    mask_type = MaskType.NONE
    keyboard_type = KeyboardType.TEXT

    def _get_value(self, value: str, options: Any) -> str:
        return value

    def _get_raw_value(self, value: str, options: Any) -> str:
        return value

    def _validate(self, value: str, options: Any) -> bool:
        return True
