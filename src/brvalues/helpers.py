"""
Small string helpers shared by every identifier module.

Nearly every validator and formatter starts the same way: pull the digits out
of whatever the caller typed, then (for formatters) lay them back out with
separators at fixed positions. Keeping those two steps here means each
identifier module only declares its *tables* (length, separator positions,
weights) and never re-implements the mechanics.
"""

from __future__ import annotations

import random
from typing import Any, Mapping


def only_numbers(value: Any) -> str:
    """
    Return only the ASCII digit characters from a value, preserving order.

    Accepts strings and ints (``format(12345678909)`` is allowed for CPF/CNPJ).
    ``None`` yields an empty string.
    """
    if value is None:
        return ""
    return "".join(ch for ch in str(value) if "0" <= ch <= "9")


def is_last_char(index: int, value: str) -> bool:
    return index == len(value) - 1


def format_positions(
    digits: str,
    length: int,
    separators: Mapping[int, str],
    pad: bool = False,
) -> str:
    """
    Lay out a digit string using a table of ``index -> separator`` rules.

    The separator is inserted right *after* the digit at each listed index,
    unless that digit is the last one of the (truncated) string, so partial
    input such as ``"0131"`` renders without a dangling hyphen.

    Args:
        digits:     Canonical digits (callers pass ``only_numbers(...)``).
        length:     Fixed identifier length; extra digits are dropped.
        separators: Index positions and the character to emit after them.
        pad:        Left-pad with zeros up to ``length`` before slicing.
    """
    if pad:
        digits = digits.rjust(length, "0")
    digits = digits[:length]

    out = []
    for i, ch in enumerate(digits):
        out.append(ch)
        if not is_last_char(i, digits) and i in separators:
            out.append(separators[i])
    return "".join(out)


def generate_random_number(length: int) -> str:
    """Random digit string of exactly ``length`` characters (leading zeros allowed)."""
    return "".join(random.choice("0123456789") for _ in range(length))
