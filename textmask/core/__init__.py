"""Core types, options, configuration and errors for textmask."""

from .config import MaskProfile, MaskProfileSet, load_profiles
from .exceptions import ConfigurationError, TextMaskError
from .options import (
    CelPhoneOptions,
    CreditCardOptions,
    CustomOptions,
    DateTimeOptions,
    MaskOptions,
    MoneyOptions,
)
from .types import CardIssuer, KeyboardType, MaskType, PlaceholderClass

__all__ = [
    # Types
    "CardIssuer",
    "KeyboardType",
    "MaskType",
    "PlaceholderClass",
    # Options
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
]
