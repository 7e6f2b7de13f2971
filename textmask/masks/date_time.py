"""Date and time values laid out by a format string."""

from __future__ import annotations

import re
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

from ..core.options import DateTimeOptions
from ..core.types import KeyboardType, MaskType, PlaceholderClass
from .base import TemplateMask
from .template import Template, Token

FIELD_TOKENS = re.compile(r"YYYY|YY|MM|DD|HH|hh|mm|ss")

STRPTIME_DIRECTIVES = {
    "YYYY": "%Y",
    "YY": "%y",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "hh": "%I",
    "mm": "%M",
    "ss": "%S",
}


@lru_cache(maxsize=64)
def datetime_template(date_format: str) -> Template:
    """Turn each field token into digit placeholders; the rest is literal."""
    tokens: list[Token] = []
    pos = 0
    for match in FIELD_TOKENS.finditer(date_format):
        tokens.extend(Token(char) for char in date_format[pos : match.start()])
        tokens.extend(Token(char, PlaceholderClass.DIGIT) for char in match.group())
        pos = match.end()
    tokens.extend(Token(char) for char in date_format[pos:])
    return Template(pattern=date_format, tokens=tuple(tokens))


def strptime_format(date_format: str) -> str:
    """Translate a mask format into a `datetime.strptime` format."""
    parts = []
    pos = 0
    for match in FIELD_TOKENS.finditer(date_format):
        parts.append(date_format[pos : match.start()].replace("%", "%%"))
        parts.append(STRPTIME_DIRECTIVES[match.group()])
        pos = match.end()
    parts.append(date_format[pos:].replace("%", "%%"))
    return "".join(parts)


class DateTimeMask(TemplateMask):
    """
    Date/time mask, e.g. ``DD/MM/YYYY HH:mm:ss``.

    Purely positional: digits fill the fields in format order and no calendar
    checks are made, so ``31/02`` is accepted. `parse` is available for
    callers that want a real `datetime`.
    """

    mask_type = MaskType.DATETIME
    keyboard_type = KeyboardType.DATETIME
    options_model = DateTimeOptions

    def _template(self, value: str, options: DateTimeOptions) -> Template:
        return datetime_template(options.format)

    def parse(self, value: Any, options: Any = None) -> Optional[datetime]:
        """Read a complete value as a datetime, or None if it is not a real date."""
        opts = self.options_model.coerce(options)
        display = self.get_value(value, opts)
        if not display or not self.validate(display, opts):
            return None
        try:
            return datetime.strptime(display, strptime_format(opts.format))
        except (ValueError, re.error):
            return None
