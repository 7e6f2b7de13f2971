"""TextMask - high-level API for masking a single field."""

from dataclasses import dataclass
from typing import Any, Optional

from textmask.core.config import MaskProfileSet
from textmask.core.types import KeyboardType, MaskType
from textmask.masks.base import BaseMask
from textmask.registry import MaskRegistry, get_default_registry, normalize_mask_type


@dataclass(frozen=True)
class MaskUpdate:
    """Result of feeding new text to a field."""

    masked: str
    raw: str


class TextMask:
    """High-level API binding one mask type and its options.

    Resolves the handler once and keeps it until the mask type changes,
    which is how an input field drives the engine on every edit.

    Examples:
        # Phone number with a custom pattern
        phone = TextMask("custom", {"mask": "(999) 999-9999"})
        phone.mask("5551234567")        # '(555) 123-4567'
        phone.update("(555) 1234")      # MaskUpdate(masked='(555) 123-4', raw='5551234')

        # Switching type re-resolves the handler
        phone.mask_type = "cpf"
    """

    def __init__(
        self,
        mask_type: Optional[Any] = None,
        options: Any = None,
        registry: Optional[MaskRegistry] = None,
    ):
        """Initialize TextMask.

        Args:
            mask_type: Mask type identifier; None or unknown means passthrough
            options: Handler options, as a mapping or an options model
            registry: Registry to resolve from (default: built-in masks)
        """
        self._registry = registry or get_default_registry()
        self.options = options
        self._mask_type = normalize_mask_type(mask_type)
        self._handler = self._registry.resolve(self._mask_type)

    @classmethod
    def from_profile(
        cls,
        name: str,
        profiles: MaskProfileSet,
        registry: Optional[MaskRegistry] = None,
    ) -> "TextMask":
        """Create a TextMask from a named profile.

        Raises:
            ConfigurationError: If the profile does not exist
        """
        profile = profiles.get(name)
        return cls(profile.type, dict(profile.options), registry=registry)

    @property
    def mask_type(self) -> str:
        """The identifier that was asked for (may be unknown)."""
        return self._mask_type

    @mask_type.setter
    def mask_type(self, value: Optional[Any]) -> None:
        identifier = normalize_mask_type(value)
        if identifier != self._mask_type:
            self._mask_type = identifier
            self._handler = self._registry.resolve(identifier)

    @property
    def handler(self) -> BaseMask:
        """The resolved handler."""
        return self._handler

    @property
    def resolved_type(self) -> MaskType:
        """The identifier of the handler actually in use."""
        return self._handler.get_type()

    @property
    def keyboard_type(self) -> KeyboardType:
        return self._handler.get_keyboard_type()

    def mask(self, raw: Any) -> str:
        """Format a raw value for display."""
        return self._handler.get_value(raw, self.options)

    def unmask(self, display: Any) -> str:
        """Recover the raw value from a display value."""
        return self._handler.get_raw_value(display, self.options)

    def is_complete(self, raw: Any) -> bool:
        """Check whether a raw value fills the mask."""
        return self._handler.validate(raw, self.options)

    def update(self, text: Any) -> MaskUpdate:
        """Mask freshly edited text and report its raw value alongside."""
        masked = self.mask(text)
        return MaskUpdate(masked=masked, raw=self.unmask(masked))

    def __repr__(self) -> str:
        return f"TextMask(mask_type='{self._mask_type}', handler={self._handler!r})"
