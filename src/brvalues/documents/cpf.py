"""
CPF (Cadastro de Pessoas Físicas), the individual taxpayer number.

Layout: ``NNN.NNN.NNN-DD``. The ninth digit is the fiscal region that issued
the number; the last two are mod-11 check digits (weights 10..2, then 11..2).
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from ..checksum import generate_checksum, mod11_check_digit
from ..geo.states import get_state
from ..helpers import format_positions, generate_random_number, only_numbers

LENGTH = 11

DOT_INDEXES = (2, 5)
HYPHEN_INDEXES = (8,)

SEPARATORS = {**{i: "." for i in DOT_INDEXES}, **{i: "-" for i in HYPHEN_INDEXES}}

RESERVED_NUMBERS = tuple(str(d) * LENGTH for d in range(10))

CHECK_DIGITS_INDEXES = (9, 10)

_FORMAT_RE = re.compile(r"\d{3}\.?\d{3}\.?\d{3}-?\d{2}", re.ASCII)


def format(cpf: Union[str, int], pad: bool = False) -> str:
    """
    Render a CPF as ``NNN.NNN.NNN-NN``.

    Non-digits are discarded and digits past the eleventh dropped. With
    ``pad=True`` short input is left-padded with zeros (useful for CPFs stored
    as integers, which lose their leading zeros).

    Examples:
        format("11144477735")       -> "111.444.777-35"
        format(1234567890, pad=True) -> "012.345.678-90"
    """
    return format_positions(only_numbers(cpf), LENGTH, SEPARATORS, pad=pad)


def generate(state: Optional[str] = None) -> str:
    """
    Generate a random valid CPF.

    When ``state`` is a known state code or name, its fiscal region digit is used as
    the ninth digit; otherwise that digit is random too.
    """
    record = get_state(state)

    while True:
        region = str(record.fiscal_region) if record else generate_random_number(1)
        base = generate_random_number(LENGTH - 3) + region
        first = str(mod11_check_digit(base, 10))
        second = str(mod11_check_digit(base + first, 11))
        cpf = f"{base}{first}{second}"
        # All-same-digit draws carry valid check digits but are reserved.
        if not is_reserved_number(cpf):
            return cpf


def is_valid_format(cpf: str) -> bool:
    """True for ``NNN.NNN.NNN-NN`` with each separator optional."""
    return bool(_FORMAT_RE.fullmatch(cpf))


def is_reserved_number(cpf: str) -> bool:
    return cpf in RESERVED_NUMBERS


def is_valid_checksum(cpf: str) -> bool:
    """
    Verify both check digits of a digit-only CPF.

    The digit at index ``i`` is computed over the ``i`` digits before it with
    weights starting at ``i + 1``.
    """
    if len(cpf) != LENGTH:
        return False
    for i in CHECK_DIGITS_INDEXES:
        mod = generate_checksum(cpf[:i], i + 1) % 11
        if cpf[i] != str(0 if mod < 2 else 11 - mod):
            return False
    return True


def is_valid(cpf: Any) -> bool:
    """
    Validate a CPF, formatted or not.

    Rejects non-strings, malformed input, all-repeated-digit numbers and wrong
    check digits.

    Examples:
        is_valid("111.444.777-35") -> True
        is_valid("11111111111")    -> False
    """
    if not cpf or not isinstance(cpf, str):
        return False

    digits = only_numbers(cpf)
    return is_valid_format(cpf) and not is_reserved_number(digits) and is_valid_checksum(digits)
