"""
PIS/PASEP/NIT, the worker registration number.

Layout: ``NNN.NNNNN.NN-D``; a single mod-11 check digit over weights
``3,2,9,8,7,6,5,4,3,2``.
"""

from __future__ import annotations

import re
from typing import Any

from ..checksum import generate_checksum

LENGTH = 11

WEIGHTS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

RESERVED_NUMBERS = tuple(str(d) * LENGTH for d in range(10))

_SEPARATORS_RE = re.compile(r"[ ().,*-]")
_DIGITS_RE = re.compile(r"[0-9]+")


def _remove_separators(pis: str) -> str:
    return _SEPARATORS_RE.sub("", pis)


def is_reserved_number(pis: str) -> bool:
    return pis in RESERVED_NUMBERS


def is_valid_checksum(pis: str) -> bool:
    """
    Verify the check digit of a digit-only PIS.

    ``11 - sum % 11`` must equal the last digit; a calculated 10 or 11 both
    stand for a check digit of 0.
    """
    calculated = 11 - (generate_checksum(pis[:-1], WEIGHTS) % 11)
    verifying = int(pis[-1])
    return (
        calculated == verifying
        or (calculated == 10 and verifying == 0)
        or (calculated == 11 and verifying == 0)
    )


def is_valid(pis: Any) -> bool:
    """
    Validate a PIS number, formatted or not.

    Unlike the other identifiers, only the usual separator characters are
    stripped; any other non-digit makes the input invalid.

    Examples:
        is_valid("120.56874.10-7") -> True
        is_valid("00000000000")    -> False
    """
    if not pis or not isinstance(pis, str):
        return False

    numeric = _remove_separators(pis)
    if len(numeric) != LENGTH or is_reserved_number(numeric) or not _DIGITS_RE.fullmatch(numeric):
        return False

    return is_valid_checksum(numeric)
