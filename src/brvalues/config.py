from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .text.casing import ACRONYMS, PREPOSITIONS
from .text.currency import DEFAULT_PRECISION


# ---- Capitalization word lists ----
class CapitalizeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lower_case_words: List[str] = Field(default_factory=lambda: list(PREPOSITIONS))
    upper_case_words: List[str] = Field(default_factory=lambda: list(ACRONYMS))


# ---- Currency rendering ----
class CurrencyConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    precision: int = Field(DEFAULT_PRECISION, ge=0, le=20)


# ---- Document formatting ----
class FormatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pad: bool = False  # left-pad CPF/CNPJ with zeros (values stored as integers)


# ---- Root config ----
class BrValuesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    capitalize: CapitalizeConfig = Field(default_factory=CapitalizeConfig)
    currency: CurrencyConfig = Field(default_factory=CurrencyConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> BrValuesConfig:
    if not path:
        return BrValuesConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return BrValuesConfig(**data)
