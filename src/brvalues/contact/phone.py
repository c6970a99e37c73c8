"""
Brazilian telephone numbers (area code + subscriber number).

Accepted shapes after stripping non-digits:

- landline: ``DD NNNN-NNNN`` (10 digits), subscriber starts with 2-5
- mobile:   ``DD 9NNNN-NNNN`` (11 digits), subscriber starts with 6-9

``DD`` must be a DDD assigned to some state. A country code (``+55``) is not
stripped, so ``+55 11 ...`` is rejected on length.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, FrozenSet

from ..geo.reference import load_states
from ..helpers import only_numbers

PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 11

MOBILE_VALID_FIRST_NUMBERS = frozenset({6, 7, 8, 9})
LANDLINE_VALID_FIRST_NUMBERS = frozenset({2, 3, 4, 5})


@lru_cache(maxsize=None)
def valid_area_codes() -> FrozenSet[int]:
    """Every DDD listed in the state reference table."""
    return frozenset(code for state in load_states() for code in state.area_codes)


def _first_number(phone: str) -> int:
    # Subscriber's first digit sits right after the two-digit DDD.
    return int(phone[2]) if len(phone) > 2 else -1


def is_valid_ddd(phone: str) -> bool:
    """
    Examples:
        is_valid_ddd("11999999999") -> True
        is_valid_ddd("00999999999") -> False
    """
    prefix = phone[:2]
    return len(prefix) == 2 and prefix.isdigit() and int(prefix) in valid_area_codes()


def is_valid_mobile_phone_length(phone: str) -> bool:
    return len(phone) == PHONE_MAX_LENGTH


def is_valid_landline_phone_length(phone: str) -> bool:
    return PHONE_MIN_LENGTH <= len(phone) < PHONE_MAX_LENGTH


def is_valid_length(phone: str) -> bool:
    return is_valid_landline_phone_length(phone) or is_valid_mobile_phone_length(phone)


def is_valid_mobile_phone_first_number(phone: str) -> bool:
    return _first_number(phone) in MOBILE_VALID_FIRST_NUMBERS


def is_valid_landline_phone_first_number(phone: str) -> bool:
    return _first_number(phone) in LANDLINE_VALID_FIRST_NUMBERS


def is_valid_first_number(phone: str) -> bool:
    """Apply the landline rule to 10-digit numbers and the mobile rule otherwise."""
    if len(phone) == PHONE_MIN_LENGTH:
        return is_valid_landline_phone_first_number(phone)
    return is_valid_mobile_phone_first_number(phone)


def is_valid_mobile_phone(phone: Any) -> bool:
    """
    Examples:
        is_valid_mobile_phone("(21) 99999-9999") -> True
        is_valid_mobile_phone("021999999999")    -> False
    """
    if not phone or not isinstance(phone, str):
        return False
    digits = only_numbers(phone)
    return (
        is_valid_mobile_phone_length(digits)
        and is_valid_mobile_phone_first_number(digits)
        and is_valid_ddd(digits)
    )


def is_valid_landline_phone(phone: Any) -> bool:
    """
    Examples:
        is_valid_landline_phone("1140028922")  -> True
        is_valid_landline_phone("11900289228") -> False
    """
    if not phone or not isinstance(phone, str):
        return False
    digits = only_numbers(phone)
    return (
        is_valid_landline_phone_length(digits)
        and is_valid_landline_phone_first_number(digits)
        and is_valid_ddd(digits)
    )


def is_valid(phone: Any) -> bool:
    """
    Validate a landline or mobile number, formatted or not.

    Examples:
        is_valid("(11) 98765-4321") -> True
        is_valid("(11) 4002-8922")  -> True
        is_valid("123")             -> False
    """
    if not phone or not isinstance(phone, str):
        return False
    digits = only_numbers(phone)
    return is_valid_length(digits) and is_valid_first_number(digits) and is_valid_ddd(digits)
