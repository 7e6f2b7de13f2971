"""Brazilian taxpayer documents: CPF and CNPJ."""

from typing import Any

from ..core.types import MaskType
from .base import TemplateMask
from .checksums import is_valid_cnpj, is_valid_cpf


class CpfMask(TemplateMask):
    """CPF (individual taxpayer number), ``999.999.999-99``."""

    mask_type = MaskType.CPF
    pattern = "999.999.999-99"

    def _validate(self, value: str, options: Any) -> bool:
        result = self._template(value, options).scan(value)
        return result.complete and is_valid_cpf(result.raw)


class CnpjMask(TemplateMask):
    """CNPJ (company registry number), ``99.999.999/9999-99``."""

    mask_type = MaskType.CNPJ
    pattern = "99.999.999/9999-99"

    def _validate(self, value: str, options: Any) -> bool:
        result = self._template(value, options).scan(value)
        return result.complete and is_valid_cnpj(result.raw)
