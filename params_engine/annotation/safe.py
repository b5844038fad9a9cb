"""
Best-effort wrappers around the introspection collaborators.

Each returns None (or a documented sentinel) instead of raising, so a model
the introspection layer cannot read never interrupts annotation.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

import numpy as np

from params_engine.introspection import ModelIntrospector, class_tags, study_variances
from params_engine.models import ModelInfo

logger = logging.getLogger(__name__)


def safe_model_info(model: Any, introspector: ModelIntrospector) -> ModelInfo:
    try:
        info = introspector.model_info(model)
    except Exception as exc:
        logger.debug("model_info failed for %s: %s", type(model).__name__, exc)
        return ModelInfo.unknown()

    if isinstance(info, ModelInfo):
        return info
    if isinstance(info, Mapping):
        try:
            return ModelInfo.model_validate(dict(info))
        except Exception as exc:
            logger.debug("model_info returned an invalid record: %s", exc)
    return ModelInfo.unknown()


def safe_formula(model: Any, introspector: ModelIntrospector) -> Optional[str]:
    try:
        formula = introspector.find_formula(model)
    except Exception as exc:
        logger.debug("find_formula failed for %s: %s", type(model).__name__, exc)
        return None

    conditional = getattr(formula, "conditional", None)
    if conditional is None and isinstance(formula, Mapping):
        conditional = formula.get("conditional")
    return None if conditional is None else str(conditional)


def safe_data(model: Any, introspector: ModelIntrospector) -> Optional[pd.DataFrame]:
    try:
        return introspector.get_data(model)
    except Exception as exc:
        logger.debug("get_data failed for %s: %s", type(model).__name__, exc)
        return None


def safe_model_class(model: Any, introspector: ModelIntrospector) -> List[str]:
    try:
        return list(introspector.model_class(model))
    except Exception as exc:
        logger.debug("model_class failed for %s: %s", type(model).__name__, exc)
        return class_tags(model)


def safe_catalog(model: Any, introspector: ModelIntrospector) -> Optional[Dict[str, str]]:
    try:
        cp = introspector.clean_parameters(model)
        return dict(zip(cp["Parameter"].astype(str), cp["Cleaned_Parameter"].astype(str)))
    except Exception as exc:
        logger.debug("clean_parameters failed for %s: %s", type(model).__name__, exc)
        return None


def safe_study_variances(model: Any) -> Optional[np.ndarray]:
    try:
        return study_variances(model)
    except (TypeError, ValueError) as exc:
        logger.warning("Study variances of %s are not numeric: %s", type(model).__name__, exc)
        return None
