"""Per-handler option models.

Callers hand options to a handler as a mapping, a model instance or None.
Each handler coerces them into its own model: unknown keys are ignored, the
camelCase names used by form libraries are accepted as aliases, and values
that fail validation are dropped so the handler default applies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..observability.logging import get_logger
from .types import CardIssuer, PlaceholderClass

logger = get_logger(__name__)

OptionsT = TypeVar("OptionsT", bound="MaskOptions")


class MaskOptions(BaseModel):
    """Options shared by every handler. Carries no keys of its own."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    @classmethod
    def coerce(cls: type[OptionsT], options: Any = None) -> OptionsT:
        """Build options from whatever the caller passed, never raising."""
        if isinstance(options, cls):
            return options
        if isinstance(options, BaseModel):
            options = options.model_dump()
        data = dict(options) if isinstance(options, Mapping) else {}

        while True:
            try:
                return cls.model_validate(data)
            except ValidationError as exc:
                rejected = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
                dropped = [key for key in data if cls._field_keys(key) & rejected]
                if not dropped:
                    logger.warning(
                        "Invalid mask options, using defaults",
                        options_model=cls.__name__,
                        error=str(exc),
                    )
                    return cls()
                logger.warning(
                    "Ignoring invalid mask options",
                    options_model=cls.__name__,
                    keys=sorted(str(key) for key in dropped),
                )
                data = {k: v for k, v in data.items() if k not in dropped}

    @classmethod
    def _field_keys(cls, key: Any) -> set[str]:
        """All spellings (name and alias) of the field a key refers to."""
        for name, field in cls.model_fields.items():
            if key == name or key == field.alias:
                return {name, field.alias or name}
        return {str(key)}


class CustomOptions(MaskOptions):
    """Options for the generic pattern mask."""

    mask: str = ""
    translation: dict[str, PlaceholderClass] = Field(default_factory=dict)
    validator: Optional[Callable[..., Any]] = None


class CreditCardOptions(MaskOptions):
    """Options for credit card numbers."""

    issuer: Optional[CardIssuer] = None
    luhn: bool = False


class MoneyOptions(MaskOptions):
    """Options for monetary amounts."""

    precision: int = Field(default=2, ge=0, le=10)
    separator: str = ","
    delimiter: str = "."
    unit: str = "R$"
    suffix_unit: str = Field(default="", alias="suffixUnit")
    zero_cents: bool = Field(default=False, alias="zeroCents")


class DateTimeOptions(MaskOptions):
    """Options for date and time values."""

    format: str = "DD/MM/YYYY HH:mm:ss"


class CelPhoneOptions(MaskOptions):
    """Options for mobile phone numbers."""

    with_ddd: bool = Field(default=True, alias="withDDD")
    ddd_mask: str = Field(default="(99) ", alias="dddMask")
