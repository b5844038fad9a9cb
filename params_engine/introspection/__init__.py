from typing import Any, List

import pandas as pd

from params_engine.models import Formula, ModelInfo
from .base import IntrospectionError, IntrospectorRegistry, ModelIntrospector, class_tags
from .meta_introspector import MetaAnalysisIntrospector, study_variances
from .names import clean_name
from .statsmodels_introspector import StatsmodelsIntrospector

registry = IntrospectorRegistry()
registry.register(MetaAnalysisIntrospector())
registry.register(StatsmodelsIntrospector())


def model_info(model: Any) -> ModelInfo:
    return registry.model_info(model)


def find_formula(model: Any) -> Formula:
    return registry.find_formula(model)


def get_data(model: Any) -> pd.DataFrame:
    return registry.get_data(model)


def clean_parameters(model: Any) -> pd.DataFrame:
    return registry.clean_parameters(model)


def model_class(model: Any) -> List[str]:
    return registry.model_class(model)


__all__ = [
    "IntrospectionError",
    "IntrospectorRegistry",
    "MetaAnalysisIntrospector",
    "ModelIntrospector",
    "StatsmodelsIntrospector",
    "class_tags",
    "clean_name",
    "clean_parameters",
    "find_formula",
    "get_data",
    "model_class",
    "model_info",
    "registry",
    "study_variances",
]
