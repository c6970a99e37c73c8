from .cities import get_cities
from .states import State, StateRecord, get_state, get_states

__all__ = ["State", "StateRecord", "get_cities", "get_state", "get_states"]
