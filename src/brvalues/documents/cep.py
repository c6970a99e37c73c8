"""CEP (Código de Endereçamento Postal), the 8-digit postal code."""

from __future__ import annotations

from typing import Any, Union

from ..helpers import format_positions, only_numbers

LENGTH = 8

HYPHEN_INDEXES = (4,)

SEPARATORS = {i: "-" for i in HYPHEN_INDEXES}


def format(cep: Union[str, int]) -> str:
    """
    Render a CEP as ``NNNNN-NNN``.

    Examples:
        format("01310100") -> "01310-100"
    """
    return format_positions(only_numbers(cep), LENGTH, SEPARATORS)


def is_valid(cep: Any) -> bool:
    """A CEP is valid when it carries exactly eight digits; there is no check digit."""
    if not cep or not isinstance(cep, str):
        return False
    return len(only_numbers(cep)) == LENGTH
