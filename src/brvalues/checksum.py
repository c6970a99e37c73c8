"""
Check-digit arithmetic used by the identifier validators.

Four families cover every Brazilian identifier in this package:

- **Weighted mod 11** (CPF, CNPJ, PIS): weighted digit sum, remainder mod 11.
- **Mod 10** (boleto partial fields): right-to-left weights 2,1 with
  products above 9 folded back to a single digit.
- **Boleto mod 11**: right-to-left weights cycling 2..9 over the barcode.
- **Mod 97-10** (CNJ judicial process numbers, ISO 7064): same family as the
  IBAN check, computed with Python's arbitrary-precision ints.

All functions expect digit-only input (callers run ``only_numbers`` first) and
never raise for such input.
"""

from __future__ import annotations

from typing import Sequence, Union

Weights = Union[int, Sequence[int]]

MOD_10_WEIGHTS = (2, 1)

BOLETO_MOD_11_INITIAL_WEIGHT = 2
BOLETO_MOD_11_FINAL_WEIGHT = 9

MOD_97_10_QUOTIENT = 97
MOD_97_10_SUM = 98


def generate_checksum(base: str, weights: Weights) -> int:
    """
    Weighted sum of the digits of ``base``, aligned left to right.

    ``weights`` is either an explicit sequence (CNPJ, PIS) or a starting
    integer ``w`` meaning ``w, w-1, w-2, ...`` (CPF uses 10 and 11).

    Examples:
        generate_checksum("111444777", 10) -> 162
    """
    if isinstance(weights, int):
        weights = [weights - i for i in range(len(base))]
    return sum(int(d) * w for d, w in zip(base, weights))


def mod11_check_digit(base: str, weights: Weights) -> int:
    """Standard mod-11 digit: remainder below 2 maps to 0, otherwise ``11 - remainder``."""
    mod = generate_checksum(base, weights) % 11
    return 0 if mod < 2 else 11 - mod


def mod10(partial: str) -> int:
    """
    Mod-10 check digit for a boleto digitable-line field.

    Digits are weighted 2,1,2,1... from the right; a product above 9 is folded
    to ``1 + product % 10`` (the sum of its two digits).
    """
    total = 0
    for i, ch in enumerate(reversed(partial)):
        d = int(ch) * MOD_10_WEIGHTS[i % 2]
        total += 1 + (d % 10) if d > 9 else d

    mod = total % 10
    return 10 - mod if mod > 0 else 0


def mod11_boleto(value: str) -> int:
    """
    General check digit of a boleto barcode (FEBRABAN layout).

    Weights run 2..9 from the right and wrap around. Remainders 0 and 1 map to
    1, never to 0, because 0 is not a legal general check digit.
    """
    weight = BOLETO_MOD_11_INITIAL_WEIGHT
    total = 0
    for ch in reversed(value):
        total += int(ch) * weight
        weight = weight + 1 if weight < BOLETO_MOD_11_FINAL_WEIGHT else BOLETO_MOD_11_INITIAL_WEIGHT

    mod = total % 11
    return 1 if mod in (0, 1) else 11 - mod


def mod97_10(head: str, tail: str) -> int:
    """
    Two-digit verifier of a CNJ process number (ISO 7064 mod 97-10).

    ``head`` holds the 11 digits before the verifier is removed (sequence
    number + year) and ``tail`` the remaining 7 (segment, court, origin).
    The remainder is carried across the two groups, then the verifier slot
    ("00") is appended: ``98 - ((head mod 97) * 10**9 + tail * 100) mod 97``.
    """
    first_remainder = int(head or "0") % MOD_97_10_QUOTIENT
    second_remainder = (first_remainder * 10**9 + int(tail or "0") * 100) % MOD_97_10_QUOTIENT
    return MOD_97_10_SUM - second_remainder
