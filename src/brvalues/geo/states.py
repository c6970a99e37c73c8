"""Brazilian states: codes, names and lookups."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .reference import StateRecord, collation_key, load_states


class State(BaseModel):
    """Public view of a state, as returned by ``get_states``."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str


def get_states() -> List[State]:
    """
    All 27 federative units sorted by name.

    Examples:
        get_states()[0] -> State(code='AC', name='Acre')
    """
    states = [State(code=r.code, name=r.name) for r in load_states()]
    return sorted(states, key=lambda s: collation_key(s.name))


def get_state(state: Optional[str]) -> Optional[StateRecord]:
    """
    Find a state by its two-letter code or its full name (exact match).

    Returns None for empty or unknown input.
    """
    if not state or not isinstance(state, str):
        return None
    for record in load_states():
        if record.code == state or record.name == state:
            return record
    return None


def state_codes() -> List[str]:
    return [r.code for r in load_states()]
