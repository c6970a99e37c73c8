"""Title-casing for Brazilian Portuguese names and company names."""

from __future__ import annotations

from typing import Iterable, Optional

ACRONYMS = ("cia", "cnpj", "cpf", "ltda", "me", "rg")

PREPOSITIONS = (
    "a",
    "com",
    "da",
    "das",
    "de",
    "do",
    "dos",
    "e",
    "em",
    "na",
    "nas",
    "no",
    "nos",
    "o",
    "por",
    "sem",
)


def capitalize(
    value: str,
    lower_case_words: Optional[Iterable[str]] = None,
    upper_case_words: Optional[Iterable[str]] = None,
) -> str:
    """
    Capitalize each word, keeping prepositions lower case and acronyms upper case.

    Words are split on single spaces and empty tokens dropped, so runs of
    spaces collapse. The first word is never lowered, even if it is a
    preposition. Both word lists are matched case-insensitively.

    Args:
        value:            Text to capitalize.
        lower_case_words: Words kept lower case (default ``PREPOSITIONS``).
        upper_case_words: Words rendered upper case (default ``ACRONYMS``).

    Examples:
        capitalize("joão da silva")            -> "João da Silva"
        capitalize("DA SILVA E FILHOS LTDA")   -> "Da Silva e Filhos LTDA"
    """
    if not value or not isinstance(value, str):
        return ""

    lower_set = {w.lower() for w in (PREPOSITIONS if lower_case_words is None else lower_case_words)}
    upper_set = {w.lower() for w in (ACRONYMS if upper_case_words is None else upper_case_words)}

    words = []
    for index, word in enumerate(w for w in value.split(" ") if w):
        lowered = word.lower()
        if index > 0 and lowered in lower_set:
            words.append(lowered)
        elif lowered in upper_set:
            words.append(word.upper())
        else:
            words.append(word[0].upper() + lowered[1:])
    return " ".join(words)
