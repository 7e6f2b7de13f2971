"""Brazilian mobile and landline phone numbers."""

from __future__ import annotations

from ..core.options import CelPhoneOptions
from ..core.types import MaskType
from .base import TemplateMask
from .template import Template, parse_template

SHORT_NUMBER = "9999-9999"
LONG_NUMBER = "99999-9999"


class CelPhoneMask(TemplateMask):
    """
    Phone mask that grows from eight to nine local digits.

    With the area code (DDD) prefix the layouts are ``(99) 9999-9999`` and,
    once an extra digit arrives, ``(99) 99999-9999``.
    """

    mask_type = MaskType.CEL_PHONE
    options_model = CelPhoneOptions

    def _template(self, value: str, options: CelPhoneOptions) -> Template:
        prefix = options.ddd_mask if options.with_ddd else ""
        short = parse_template(prefix + SHORT_NUMBER)
        long = parse_template(prefix + LONG_NUMBER)
        # Count through the layout so digits in the prefix are not counted.
        if long.scan(value).filled > short.capacity:
            return long
        return short
