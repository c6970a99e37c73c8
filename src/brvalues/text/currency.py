"""
Brazilian real (BRL) amounts: ``1.234,56``.

Formatting uses ``.`` for thousands and ``,`` for decimals. Parsing is
deliberately blunt: every digit is kept and read as centavos, which makes it
tolerant of ``R$`` prefixes, spaces and either separator style, at the cost
of assuming two decimal places.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Union

from ..helpers import only_numbers

Number = Union[int, float, Decimal]

DEFAULT_PRECISION = 2

# Swap Python's "1,234.56" grouping into "1.234,56".
_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})


def format(value: Number, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render a number with ``precision`` decimals in pt-BR notation.

    Examples:
        format(1234.56)              -> "1.234,56"
        format(1234.56, precision=3) -> "1.234,560"
        format(-1000000)             -> "-1.000.000,00"
    """
    return f"{value:,.{precision}f}".translate(_PT_BR_SEPARATORS)


def parse(value: Any) -> float:
    """
    Read a currency string as a number of centavos divided by 100.

    Examples:
        parse("R$ 1.234,56") -> 1234.56
        parse("R$ 0,50")     -> 0.5
        parse("")            -> 0.0
    """
    if not value or not isinstance(value, str):
        return 0.0
    return int(only_numbers(value) or "0") / 100
