"""Check digit algorithms used by document and card masks."""

from __future__ import annotations

_CNPJ_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _digits(value: str, length: int) -> list[int] | None:
    if len(value) != length or not value.isascii() or not value.isdigit():
        return None
    return [int(d) for d in value]


def is_valid_luhn(number: str) -> bool:
    """
    Validate a card number with the Luhn (mod 10) algorithm.

    Every second digit counted from the right is doubled, nine is subtracted
    from doubles above nine, and the total must be a multiple of ten.
    """
    digits = _digits(number, len(number))
    if not digits:
        return False

    total = 0
    for index, digit in enumerate(reversed(digits)):
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_cpf(cpf: str) -> bool:
    """
    Validate a Brazilian CPF (11 digits, two mod 11 check digits).

    Sequences of one repeated digit pass the arithmetic but are not issued,
    so they are rejected.
    """
    digits = _digits(cpf, 11)
    if digits is None or len(set(digits)) == 1:
        return False

    for position in (9, 10):
        total = sum(d * w for d, w in zip(digits[:position], range(position + 1, 1, -1)))
        check = (total * 10) % 11 % 10
        if check != digits[position]:
            return False
    return True


def is_valid_cnpj(cnpj: str) -> bool:
    """
    Validate a Brazilian CNPJ (14 digits, two mod 11 check digits).

    The first check digit weighs the first 12 digits with 5..2, 9..2; the
    second weighs the first 13 with 6..2, 9..2. A remainder below 2 gives a
    check digit of 0, otherwise 11 minus the remainder.
    """
    digits = _digits(cnpj, 14)
    if digits is None or len(set(digits)) == 1:
        return False

    for weights in (_CNPJ_WEIGHTS, (6,) + _CNPJ_WEIGHTS):
        position = len(weights)
        remainder = sum(d * w for d, w in zip(digits[:position], weights)) % 11
        check = 0 if remainder < 2 else 11 - remainder
        if check != digits[position]:
            return False
    return True
