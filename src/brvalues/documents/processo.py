"""
Judicial process number in the CNJ unified numbering (Resolução CNJ 65/2008).

Layout: ``NNNNNNN-DD.AAAA.J.TT.OOOO``

- ``NNNNNNN`` sequence number
- ``DD``      check digits (ISO 7064 mod 97-10)
- ``AAAA``    filing year
- ``J``       judicial segment
- ``TT``      court
- ``OOOO``    originating unit
"""

from __future__ import annotations

from typing import Any, Union

from ..checksum import mod97_10
from ..helpers import format_positions, only_numbers

LENGTH = 20

DOT_INDEXES = (8, 12, 13, 15)
HYPHEN_INDEXES = (6,)

SEPARATORS = {**{i: "." for i in DOT_INDEXES}, **{i: "-" for i in HYPHEN_INDEXES}}

CHECK_DIGIT_START_POSITION = 7
CHECK_DIGIT_LENGTH = 2

# Digits (check digits removed) that form the first mod-97 group.
FIRST_GROUP_LENGTH = 11


def format(processo: Union[str, int]) -> str:
    """
    Render a process number as ``NNNNNNN-DD.AAAA.J.TT.OOOO``.

    Examples:
        format("12345678901234567890") -> "1234567-89.0123.4.56.7890"
        format("1234567890123456")     -> "1234567-89.0123.4.56"
    """
    return format_positions(only_numbers(processo), LENGTH, SEPARATORS)


def calculate_check_digits(processo: str) -> str:
    """
    Compute the two check digits for a 20-digit process number.

    Whatever currently sits at positions 7-8 is ignored.
    """
    end = CHECK_DIGIT_START_POSITION + CHECK_DIGIT_LENGTH
    rest = processo[:CHECK_DIGIT_START_POSITION] + processo[end:]
    verifier = mod97_10(rest[:FIRST_GROUP_LENGTH], rest[FIRST_GROUP_LENGTH:])
    return f"{verifier:02d}"


def verify_digit(processo: str) -> bool:
    """True when the digits at positions 7-8 match the mod 97-10 verifier."""
    end = CHECK_DIGIT_START_POSITION + CHECK_DIGIT_LENGTH
    return processo[CHECK_DIGIT_START_POSITION:end] == calculate_check_digits(processo)


def is_valid(processo: Any) -> bool:
    """
    Validate a CNJ process number, formatted or not.

    Examples:
        is_valid("0000001-39.2024.8.26.0100") -> True
        is_valid("123")                        -> False
    """
    if not processo or not isinstance(processo, str):
        return False

    digits = only_numbers(processo)
    if len(digits) != LENGTH:
        return False

    return verify_digit(digits)
