"""
Boleto bancário digitable line (linha digitável), FEBRABAN layout.

The 47-digit line is the barcode rearranged into five fields for typing::

    AAAAA.AAAAX BBBBB.BBBBBY CCCCC.CCCCCZ K UUUUVVVVVVVVVV

``X``, ``Y`` and ``Z`` are mod-10 digits of the first three fields; ``K`` is
the barcode's general mod-11 digit. Field boundaries below are fixed by the
standard and must not be derived.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Union

from ..checksum import mod10, mod11_boleto
from ..helpers import format_positions, only_numbers


class Partial(NamedTuple):
    start: int
    end: int
    index: int


PARTIALS = (
    Partial(start=0, end=9, index=9),
    Partial(start=10, end=20, index=20),
    Partial(start=21, end=31, index=31),
)

DOT_INDEXES = (4, 14, 25)
SPACE_INDEXES = (9, 20, 31, 32)

SEPARATORS = {**{i: "." for i in DOT_INDEXES}, **{i: " " for i in SPACE_INDEXES}}

LENGTH = 47

CHECK_DIGIT_POSITION = 4

# (start, end) slices of the digitable line, in barcode order.
DIGITABLE_LINE_TO_BOLETO_CONVERT_POSITIONS = (
    (0, 4),
    (32, 47),
    (4, 9),
    (10, 20),
    (21, 31),
)


def is_valid_partials(digitable_line: str) -> bool:
    """Check the mod-10 digit of each of the three leading fields."""
    return all(
        int(digitable_line[p.index]) == mod10(digitable_line[p.start:p.end])
        for p in PARTIALS
    )


def to_barcode(digitable_line: str) -> str:
    """
    Rearrange a 47-digit digitable line into the 44-digit barcode order.

    Examples:
        to_barcode("00190500954014481606906809350314337370000000100")
            -> "00193373700000001000500940144816060680935031"
    """
    return "".join(digitable_line[start:end] for start, end in DIGITABLE_LINE_TO_BOLETO_CONVERT_POSITIONS)


def is_valid_check_digit(barcode: str) -> bool:
    """Check the general digit at ``CHECK_DIGIT_POSITION`` of a barcode."""
    value = barcode[:CHECK_DIGIT_POSITION] + barcode[CHECK_DIGIT_POSITION + 1:]
    return int(barcode[CHECK_DIGIT_POSITION]) == mod11_boleto(value)


def is_valid(digitable_line: Any) -> bool:
    """
    Validate a boleto digitable line, formatted or not.

    Order of checks:
      1) exactly 47 digits after stripping separators
      2) each field's mod-10 digit
      3) the general mod-11 digit over the rearranged barcode
    """
    if not digitable_line or not isinstance(digitable_line, str):
        return False

    digits = only_numbers(digitable_line)
    if len(digits) != LENGTH:
        return False

    if not is_valid_partials(digits):
        return False

    return is_valid_check_digit(to_barcode(digits))


def format(digitable_line: Union[str, int]) -> str:
    """
    Render a digitable line with its dots and spaces.

    Examples:
        format("00190500954014481606906809350314337370000000100")
            -> "00190.50095 40144.816069 06809.350314 3 37370000000100"
    """
    return format_positions(only_numbers(digitable_line), LENGTH, SEPARATORS)
