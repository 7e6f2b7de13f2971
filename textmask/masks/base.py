"""Base class shared by every mask handler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..core.options import MaskOptions
from ..core.types import KeyboardType, MaskType
from .template import Template, parse_template


class BaseMask(ABC):
    """
    A stateless mask handler for one mask family.

    Subclasses declare the identifier they claim, their keyboard hint and
    the options model they understand, then implement the three transforms.
    The public methods are total: `None` values become the empty string,
    options are coerced into the handler's model, and nothing raises on
    malformed input.

    Example:
        >>> from textmask.masks import CustomMask
        >>> phone = CustomMask()
        >>> phone.get_value("5551234567", {"mask": "(999) 999-9999"})
        '(555) 123-4567'
    """

    mask_type: ClassVar[MaskType]
    keyboard_type: ClassVar[KeyboardType] = KeyboardType.NUMERIC
    options_model: ClassVar[type[MaskOptions]] = MaskOptions

    @classmethod
    def get_type(cls) -> MaskType:
        """Identifier this handler claims in the registry."""
        return cls.mask_type

    @classmethod
    def get_keyboard_type(cls) -> KeyboardType:
        """Preferred input character class for this mask."""
        return cls.keyboard_type

    def get_value(self, value: Any, options: Any = None) -> str:
        """Format a raw value for display."""
        opts = self.options_model.coerce(options)
        raw = self._normalize(value, opts)
        if not raw:
            return ""
        return self._get_value(raw, opts)

    def get_raw_value(self, value: Any, options: Any = None) -> str:
        """Recover the raw value from a (possibly partial) display value."""
        opts = self.options_model.coerce(options)
        display = self._normalize(value, opts)
        if not display:
            return ""
        return self._get_raw_value(display, opts)

    def validate(self, value: Any, options: Any = None) -> bool:
        """Report whether the value fills every placeholder of the mask."""
        opts = self.options_model.coerce(options)
        return self._validate(self._normalize(value, opts), opts)

    def _normalize(self, value: Any, options: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @abstractmethod
    def _get_value(self, value: str, options: Any) -> str:
        """Format a non-empty value."""

    @abstractmethod
    def _get_raw_value(self, value: str, options: Any) -> str:
        """Extract the raw characters from a non-empty value."""

    @abstractmethod
    def _validate(self, value: str, options: Any) -> bool:
        """Completeness check, called for empty values too."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.get_type().value}')"


class TemplateMask(BaseMask):
    """A handler driven entirely by a placeholder template.

    Subclasses either set `pattern` or override `_template` when the active
    template depends on the value being formatted.
    """

    pattern: ClassVar[str] = ""

    def _template(self, value: str, options: Any) -> Template:
        return parse_template(self.pattern)

    def _get_value(self, value: str, options: Any) -> str:
        return self._template(value, options).scan(value).display

    def _get_raw_value(self, value: str, options: Any) -> str:
        return self._template(value, options).scan(value, formatted=True).raw

    def _validate(self, value: str, options: Any) -> bool:
        return self._template(value, options).scan(value).complete
