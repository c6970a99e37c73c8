"""Validation, formatting and generation of Brazilian identifiers and values."""

from .contact import email, phone
from .documents import boleto, cep, cnpj, cpf, pis, processo
from .geo import get_cities, get_state, get_states
from .text import capitalize, currency

__version__ = "0.1.0"

__all__ = [
    "boleto",
    "capitalize",
    "cep",
    "cnpj",
    "cpf",
    "currency",
    "email",
    "get_cities",
    "get_state",
    "get_states",
    "phone",
    "pis",
    "processo",
]
