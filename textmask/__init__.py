"""textmask: format raw input with named masks and read it back.

A mask type (``custom``, ``money``, ``cpf``, ``credit-card`` ...) resolves to a
stateless handler that turns a raw value into its display form, recovers the
raw value from a display string, and reports whether a value is complete.
Handlers never raise on malformed input, and unknown mask types fall back to
the passthrough handler.
"""

__version__ = "0.1.0"
__author__ = "textmask Team"

from .core import (
    CardIssuer,
    CelPhoneOptions,
    ConfigurationError,
    CreditCardOptions,
    CustomOptions,
    DateTimeOptions,
    KeyboardType,
    MaskOptions,
    MaskProfile,
    MaskProfileSet,
    MaskType,
    MoneyOptions,
    PlaceholderClass,
    TextMaskError,
    load_profiles,
)
from .engine import MaskUpdate, TextMask
from .masks import (
    BUILTIN_MASKS,
    BaseMask,
    CelPhoneMask,
    CnpjMask,
    CpfMask,
    CreditCardMask,
    CustomMask,
    DateTimeMask,
    MoneyMask,
    OnlyNumbersMask,
    PassthroughMask,
    ZipCodeMask,
)
from .observability import configure_logging
from .registry import MaskRegistry, get_default_registry, resolve

__all__ = [
    "__version__",
    "__author__",
    # Simplified API
    "TextMask",
    "MaskUpdate",
    "resolve",
    # Registry
    "MaskRegistry",
    "get_default_registry",
    # Handlers
    "BUILTIN_MASKS",
    "BaseMask",
    "CustomMask",
    "CreditCardMask",
    "CpfMask",
    "CnpjMask",
    "MoneyMask",
    "DateTimeMask",
    "OnlyNumbersMask",
    "CelPhoneMask",
    "ZipCodeMask",
    "PassthroughMask",
    # Types and options
    "MaskType",
    "KeyboardType",
    "PlaceholderClass",
    "CardIssuer",
    "MaskOptions",
    "CustomOptions",
    "CreditCardOptions",
    "MoneyOptions",
    "DateTimeOptions",
    "CelPhoneOptions",
    # Profiles
    "MaskProfile",
    "MaskProfileSet",
    "load_profiles",
    # Errors
    "TextMaskError",
    "ConfigurationError",
    # Logging
    "configure_logging",
]
