from . import currency
from .casing import ACRONYMS, PREPOSITIONS, capitalize

__all__ = ["ACRONYMS", "PREPOSITIONS", "capitalize", "currency"]
