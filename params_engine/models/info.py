"""
Pydantic records describing a fitted model, as reported by the introspection layer
"""
from pydantic import BaseModel
from typing import Optional


class ModelInfo(BaseModel):
    family: str = "unknown"
    link_function: str = "unknown"

    is_binomial: bool = False
    is_logit: bool = False
    is_probit: bool = False
    is_ordinal: bool = False
    is_multinomial: bool = False
    is_categorical: bool = False
    is_count: bool = False
    is_linear: bool = False
    is_zero_inflated: bool = False
    is_mixed: bool = False
    is_meta: bool = False

    @classmethod
    def unknown(cls) -> "ModelInfo":
        """Sentinel used when a model cannot be classified"""
        return cls(family="unknown", link_function="unknown")


class Formula(BaseModel):
    conditional: str
    random: Optional[str] = None
    zero_inflated: Optional[str] = None
