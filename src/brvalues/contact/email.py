"""
Email address validation.

A structural check, not RFC 5322: one optional leading special character,
alphanumerics separated by at most one special character, ``@``, dotted
domain labels and an alphanumeric top-level domain. Length limits follow
RFC 5321 (64-char local part, 253-char domain).
"""

from __future__ import annotations

import re
from typing import Any

MAX_RECIPIENT_LENGTH = 64
MAX_DOMAIN_LENGTH = 253
MAX_EMAIL_LENGTH = MAX_RECIPIENT_LENGTH + 1 + MAX_DOMAIN_LENGTH

_VALID_EMAIL_RE = re.compile(
    r"(?P<recipient>[!#$%&'*+\-/=?^_`{|}~]?(?:[a-zA-Z0-9][!#$%&'*+\-/=?^_`{|}~.]?)+)"
    r"@"
    r"(?P<domain>(?:[a-zA-Z0-9][-.]?)+)"
    r"(?P<tld>\.[a-zA-Z0-9]+)"
)


def is_valid(email: Any) -> bool:
    """
    Validate an email address.

    Checks, in order: non-empty string, total length, structure, local-part
    length, then domain + TLD length.

    Examples:
        is_valid("user@example.com") -> True
        is_valid("user@localhost")   -> False
    """
    if not email or not isinstance(email, str):
        return False

    if len(email) > MAX_EMAIL_LENGTH:
        return False

    match = _VALID_EMAIL_RE.fullmatch(email)
    if not match:
        return False

    if len(match.group("recipient")) > MAX_RECIPIENT_LENGTH:
        return False
    if len(match.group("domain")) + len(match.group("tld")) > MAX_DOMAIN_LENGTH:
        return False

    return True
