"""Mask handlers, one per mask family."""

from .base import BaseMask, TemplateMask
from .credit_card import CreditCardMask, detect_issuer
from .custom import CustomMask
from .date_time import DateTimeMask
from .documents import CnpjMask, CpfMask
from .money import MoneyMask
from .phone import CelPhoneMask
from .simple import OnlyNumbersMask, PassthroughMask, ZipCodeMask
from .template import ScanResult, Template, Token, parse_template

# Enumeration order used by the registry; the first class claiming a type wins.
BUILTIN_MASKS: tuple[type[BaseMask], ...] = (
    CustomMask,
    CreditCardMask,
    CpfMask,
    CnpjMask,
    MoneyMask,
    DateTimeMask,
    OnlyNumbersMask,
    CelPhoneMask,
    ZipCodeMask,
    PassthroughMask,
)

__all__ = [
    "BUILTIN_MASKS",
    "BaseMask",
    "TemplateMask",
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
    "detect_issuer",
    "ScanResult",
    "Template",
    "Token",
    "parse_template",
]
