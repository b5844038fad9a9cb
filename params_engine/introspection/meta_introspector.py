"""
Introspection for statsmodels meta-analysis results (``combine_effects``)
"""
from typing import Any, List

import numpy as np
import pandas as pd
from statsmodels.stats.meta_analysis import CombineResults

from params_engine.models import Formula, ModelInfo
from .base import IntrospectionError, class_tags


def study_variances(model: Any):
    """Per-study sampling variances stored on a meta-analysis result, or None"""
    for attr in ("vi", "var_eff", "variance"):
        value = getattr(model, attr, None)
        if value is not None:
            return np.asarray(value, dtype=float)
    return None


class MetaAnalysisIntrospector:
    """Fixed/random-effects pooling results from statsmodels.stats.meta_analysis"""

    def can_handle(self, model: Any) -> bool:
        return isinstance(model, CombineResults)

    def model_info(self, model: Any) -> ModelInfo:
        return ModelInfo(family="gaussian", link_function="identity", is_linear=True, is_meta=True)

    def find_formula(self, model: Any) -> Formula:
        raise IntrospectionError("Meta-analysis results carry no model formula", model)

    def get_data(self, model: Any) -> pd.DataFrame:
        effect = getattr(model, "eff", getattr(model, "effect", None))
        variance = study_variances(model)
        if effect is None or variance is None:
            raise IntrospectionError("Meta-analysis result has no per-study effects", model)
        effect = np.asarray(effect, dtype=float)
        row_names = getattr(model, "row_names", None)
        if row_names is None or len(row_names) != len(effect):
            row_names = [str(i + 1) for i in range(len(effect))]
        return pd.DataFrame({
            "Study": [str(name) for name in row_names],
            "Effect": effect,
            "Variance": variance,
        })

    def clean_parameters(self, model: Any) -> pd.DataFrame:
        studies = self.get_data(model)["Study"].tolist()
        names = studies + ["Overall"]
        return pd.DataFrame({"Parameter": names, "Cleaned_Parameter": names})

    def model_class(self, model: Any) -> List[str]:
        return class_tags(model)
