"""Generic pattern mask."""

from __future__ import annotations

from typing import Optional

from ..core.options import CustomOptions
from ..core.types import KeyboardType, MaskType
from ..observability.logging import get_logger
from .base import BaseMask
from .template import Template, parse_template

logger = get_logger(__name__)


class CustomMask(BaseMask):
    """
    Mask driven by a caller-supplied pattern such as ``(999) 999-9999``.

    Placeholder characters are ``9`` (digit), ``A`` (letter), ``S`` (letter
    or digit) and ``*`` (anything); `translation` adds more. Every other
    pattern character is a literal. Without a pattern the mask is identity.

    An optional `validator(raw, options)` callable is consulted after the
    completeness check; if it raises, the value is reported incomplete.
    """

    mask_type = MaskType.CUSTOM
    keyboard_type = KeyboardType.TEXT
    options_model = CustomOptions

    def _compiled(self, options: CustomOptions) -> Optional[Template]:
        if not options.mask:
            return None
        return parse_template(options.mask, options.translation)

    def _get_value(self, value: str, options: CustomOptions) -> str:
        template = self._compiled(options)
        if template is None:
            return value
        return template.scan(value).display

    def _get_raw_value(self, value: str, options: CustomOptions) -> str:
        template = self._compiled(options)
        if template is None:
            return value
        return template.scan(value, formatted=True).raw

    def _validate(self, value: str, options: CustomOptions) -> bool:
        template = self._compiled(options)
        complete = True if template is None else template.scan(value).complete
        if not complete or options.validator is None:
            return complete

        try:
            return bool(options.validator(value, options))
        except Exception as e:
            logger.warning(
                "Custom mask validator failed",
                pattern=options.mask,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False
