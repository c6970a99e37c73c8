"""
CNPJ (Cadastro Nacional da Pessoa Jurídica), the corporate taxpayer number.

Layout: ``NN.NNN.NNN/BBBB-DD`` (root, branch, two mod-11 check digits).
"""

from __future__ import annotations

import re
from typing import Any, Union

from ..checksum import generate_checksum, mod11_check_digit
from ..helpers import format_positions, generate_random_number, only_numbers

LENGTH = 14

DOT_INDEXES = (1, 4)
SLASH_INDEXES = (7,)
HYPHEN_INDEXES = (11,)

SEPARATORS = {
    **{i: "." for i in DOT_INDEXES},
    **{i: "/" for i in SLASH_INDEXES},
    **{i: "-" for i in HYPHEN_INDEXES},
}

RESERVED_NUMBERS = tuple(str(d) * LENGTH for d in range(10))

CHECK_DIGITS_INDEXES = (12, 13)

FIRST_CHECK_DIGIT_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_CHECK_DIGIT_WEIGHTS = (6,) + FIRST_CHECK_DIGIT_WEIGHTS

_FORMAT_RE = re.compile(r"\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}", re.ASCII)


def format(cnpj: Union[str, int], pad: bool = False) -> str:
    """
    Render a CNPJ as ``NN.NNN.NNN/NNNN-NN``.

    Examples:
        format("11222333000181") -> "11.222.333/0001-81"
        format("112223")         -> "11.222.3"
    """
    return format_positions(only_numbers(cnpj), LENGTH, SEPARATORS, pad=pad)


def generate() -> str:
    """Generate a random CNPJ with valid check digits."""
    while True:
        base = generate_random_number(LENGTH - 2)
        first = str(mod11_check_digit(base, FIRST_CHECK_DIGIT_WEIGHTS))
        second = str(mod11_check_digit(base + first, SECOND_CHECK_DIGIT_WEIGHTS))
        cnpj = f"{base}{first}{second}"
        if not is_reserved_number(cnpj):
            return cnpj


def is_valid_format(cnpj: str) -> bool:
    """True for ``NN.NNN.NNN/NNNN-NN`` with each separator optional."""
    return bool(_FORMAT_RE.fullmatch(cnpj))


def is_reserved_number(cnpj: str) -> bool:
    return cnpj in RESERVED_NUMBERS


def is_valid_checksum(cnpj: str) -> bool:
    """Verify both check digits of a digit-only CNPJ."""
    if len(cnpj) != LENGTH:
        return False
    for i, weights in zip(CHECK_DIGITS_INDEXES, (FIRST_CHECK_DIGIT_WEIGHTS, SECOND_CHECK_DIGIT_WEIGHTS)):
        mod = generate_checksum(cnpj[:i], weights) % 11
        if cnpj[i] != str(0 if mod < 2 else 11 - mod):
            return False
    return True


def is_valid(cnpj: Any) -> bool:
    """
    Validate a CNPJ, formatted or not.

    Examples:
        is_valid("11.222.333/0001-81") -> True
        is_valid("11222333000182")     -> False
    """
    if not cnpj or not isinstance(cnpj, str):
        return False

    digits = only_numbers(cnpj)
    return is_valid_format(cnpj) and not is_reserved_number(digits) and is_valid_checksum(digits)
