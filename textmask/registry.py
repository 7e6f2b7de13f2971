"""Registry mapping mask type identifiers to handlers."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any, Optional

from .core.types import MaskType
from .masks import BUILTIN_MASKS, BaseMask, PassthroughMask
from .observability.logging import get_logger

logger = get_logger(__name__)


def normalize_mask_type(mask_type: Any) -> str:
    """Turn a MaskType, string or None into a plain identifier."""
    if mask_type is None:
        return MaskType.NONE.value
    if isinstance(mask_type, MaskType):
        return mask_type.value
    return str(mask_type)


class MaskRegistry:
    """
    Static lookup from type identifier to mask handler.

    The identifier table is built once from the handler classes, in order,
    keeping the first class that claims an identifier. Handlers are stateless,
    so one instance per class is created on first use and shared afterwards.
    `resolve` never fails: absent or unknown identifiers get the passthrough
    handler.

    Example:
        >>> registry = MaskRegistry()
        >>> registry.resolve("cpf").get_value("12345678901")
        '123.456.789-01'
        >>> registry.resolve("no-such-type").get_type()
        <MaskType.NONE: 'none'>
    """

    def __init__(self, masks: Iterable[type[BaseMask]] = BUILTIN_MASKS) -> None:
        self._classes: dict[str, type[BaseMask]] = {}
        for mask_class in masks:
            self._classes.setdefault(mask_class.get_type().value, mask_class)
        self._instances: dict[type[BaseMask], BaseMask] = {}
        self._lock = threading.Lock()

    def resolve(self, mask_type: Optional[Any] = None) -> BaseMask:
        """Return the handler for `mask_type`, or the passthrough handler."""
        identifier = normalize_mask_type(mask_type)
        mask_class = self._classes.get(identifier)
        if mask_class is None:
            logger.debug(
                "Unknown mask type, using passthrough", mask_type=identifier
            )
            mask_class = self._classes.get(MaskType.NONE.value, PassthroughMask)
        return self._instance(mask_class)

    def _instance(self, mask_class: type[BaseMask]) -> BaseMask:
        handler = self._instances.get(mask_class)
        if handler is None:
            with self._lock:
                handler = self._instances.get(mask_class)
                if handler is None:
                    handler = mask_class()
                    self._instances[mask_class] = handler
        return handler

    def available_types(self) -> list[str]:
        """Registered identifiers in enumeration order."""
        return list(self._classes)

    def is_registered(self, mask_type: Any) -> bool:
        """Check whether an identifier has its own handler."""
        return normalize_mask_type(mask_type) in self._classes


_default_registry: Optional[MaskRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> MaskRegistry:
    """Get the process-wide registry of built-in masks."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = MaskRegistry()
    return _default_registry


def resolve(mask_type: Optional[Any] = None) -> BaseMask:
    """Resolve a mask type with the default registry."""
    return get_default_registry().resolve(mask_type)
