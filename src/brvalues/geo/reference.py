"""
Loader for the packaged reference data (states, area codes, cities).

The YAML files under ``brvalues/geo/data/`` are read once per process and
exposed as immutable structures; every accessor in ``states``/``cities``
and the phone area-code table reads from here.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field

_DATA_PACKAGE = "brvalues.geo"


class StateRecord(BaseModel):
    """Full reference record for one federative unit."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    fiscal_region: int = Field(ge=0, le=9)
    area_codes: Tuple[int, ...] = ()


def _read_yaml(fname: str) -> Dict[str, Any]:
    text = resources.files(_DATA_PACKAGE).joinpath("data").joinpath(fname).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


@lru_cache(maxsize=None)
def load_states() -> Tuple[StateRecord, ...]:
    data = _read_yaml("states.yaml")
    return tuple(
        StateRecord(code=code, **spec) for code, spec in (data.get("states", {}) or {}).items()
    )


@lru_cache(maxsize=None)
def load_cities() -> Mapping[str, Tuple[str, ...]]:
    data = _read_yaml("cities.yaml")
    return MappingProxyType(
        {code: tuple(names) for code, names in (data.get("cities", {}) or {}).items()}
    )


def collation_key(value: str) -> Tuple[str, str]:
    """
    Sort key approximating pt-BR collation.

    Accents and case are ignored on the first pass (``Ávila`` sorts next to
    ``Avaré``), with the raw string as a tie-breaker for a stable order.
    """
    chars = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in chars if not unicodedata.combining(ch))
    return base.casefold(), value
