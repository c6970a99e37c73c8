"""Municipalities per state."""

from __future__ import annotations

from typing import List, Optional

from .reference import collation_key, load_cities
from .states import get_state


def get_cities(state: Optional[str] = None) -> List[str]:
    """
    City names for a state (by code or full name), sorted alphabetically.

    Without a state, every city of every state is returned, also sorted.
    An unknown state yields an empty list.

    The bundled table is a subset (capital and main municipalities per
    state), not the full IBGE list, so the example output below reflects
    that subset.

    Examples:
        get_cities("SP")[:2] -> ['Americana', 'Araraquara']
        get_cities("XX")     -> []
    """
    cities = load_cities()

    if state:
        record = get_state(state)
        if record is None:
            return []
        return sorted(cities.get(record.code, ()), key=collation_key)

    return sorted((c for names in cities.values() for c in names), key=collation_key)
