"""
Introspection for statsmodels models and fitted results
"""
from typing import Any, List, Optional, Tuple

import pandas as pd
from statsmodels.base.model import Model
from statsmodels.discrete.count_model import GenericZeroInflated
from statsmodels.discrete.discrete_model import (
    GeneralizedPoisson,
    Logit,
    MNLogit,
    NegativeBinomial,
    NegativeBinomialP,
    Poisson,
    Probit,
)
from statsmodels.genmod import families
from statsmodels.genmod.generalized_linear_model import GLM
from statsmodels.miscmodels.ordinal_model import OrderedModel
from statsmodels.regression.linear_model import RegressionModel
from statsmodels.regression.mixed_linear_model import MixedLM

from params_engine.models import Formula, ModelInfo
from .base import IntrospectionError, class_tags
from .names import clean_name

GLM_FAMILY_NAMES = {
    "Binomial": "binomial",
    "Poisson": "poisson",
    "NegativeBinomial": "negative binomial",
    "Gaussian": "gaussian",
    "Gamma": "Gamma",
    "InverseGaussian": "inverse.gaussian",
    "Tweedie": "tweedie",
}

# scipy distribution name -> link
ORDINAL_LINKS = {"logistic": "logit", "norm": "probit"}


def _unwrap(obj: Any) -> Tuple[Model, Optional[Any]]:
    """Return (model, results); results is None when a bare model was passed"""
    if isinstance(obj, Model):
        return obj, None
    model = getattr(obj, "model", None)
    if isinstance(model, Model):
        return model, obj
    raise IntrospectionError(f"Not a statsmodels model or result: {type(obj).__name__}", obj)


def _count_family(model: Model) -> str:
    if isinstance(model, (NegativeBinomial, NegativeBinomialP)):
        return "negative binomial"
    if isinstance(model, GeneralizedPoisson):
        return "generalized poisson"
    return "poisson"


class StatsmodelsIntrospector:
    """
    Classifies statsmodels models.

    Covered:
    1. GLM (any family/link)
    2. Logit, Probit
    3. MNLogit
    4. OrderedModel
    5. Poisson, GeneralizedPoisson, NegativeBinomial(P)
    6. Zero-inflated count models
    7. MixedLM
    8. Linear regression (OLS, WLS, GLS)
    """

    def can_handle(self, model: Any) -> bool:
        try:
            _unwrap(model)
        except IntrospectionError:
            return False
        return True

    def model_info(self, model: Any) -> ModelInfo:
        mod, _ = _unwrap(model)

        if isinstance(mod, GLM):
            family = mod.family
            link = type(family.link).__name__.lower()
            return ModelInfo(
                family=GLM_FAMILY_NAMES.get(type(family).__name__, type(family).__name__.lower()),
                link_function=link,
                is_binomial=isinstance(family, families.Binomial),
                is_logit=link == "logit",
                is_probit=link == "probit",
                is_count=isinstance(family, (families.Poisson, families.NegativeBinomial)),
                is_linear=isinstance(family, families.Gaussian) and link == "identity",
            )

        if isinstance(mod, OrderedModel):
            distr = getattr(getattr(mod, "distr", None), "name", "unknown")
            link = ORDINAL_LINKS.get(distr, distr)
            return ModelInfo(
                family="ordinal",
                link_function=link,
                is_ordinal=True,
                is_logit=link == "logit",
                is_probit=link == "probit",
            )

        if isinstance(mod, MNLogit):
            return ModelInfo(
                family="multinomial",
                link_function="logit",
                is_multinomial=True,
                is_logit=True,
            )

        if isinstance(mod, (Logit, Probit)):
            link = "logit" if isinstance(mod, Logit) else "probit"
            return ModelInfo(
                family="binomial",
                link_function=link,
                is_binomial=True,
                is_logit=link == "logit",
                is_probit=link == "probit",
            )

        # zero-inflated models are CountModel subclasses too, check them first
        if isinstance(mod, GenericZeroInflated):
            return ModelInfo(
                family=_count_family(getattr(mod, "model_main", mod)),
                link_function="log",
                is_count=True,
                is_zero_inflated=True,
            )

        if isinstance(mod, (Poisson, GeneralizedPoisson, NegativeBinomial, NegativeBinomialP)):
            return ModelInfo(family=_count_family(mod), link_function="log", is_count=True)

        if isinstance(mod, MixedLM):
            return ModelInfo(family="gaussian", link_function="identity", is_linear=True, is_mixed=True)

        if isinstance(mod, RegressionModel):
            return ModelInfo(family="gaussian", link_function="identity", is_linear=True)

        raise IntrospectionError(f"Unsupported statsmodels model: {type(mod).__name__}", model)

    def find_formula(self, model: Any) -> Formula:
        mod, _ = _unwrap(model)
        formula = getattr(mod, "formula", None)
        if not isinstance(formula, str):
            raise IntrospectionError("Model was not specified with a formula", model)
        return Formula(conditional=formula)

    def get_data(self, model: Any) -> pd.DataFrame:
        mod, _ = _unwrap(model)
        frame = getattr(getattr(mod, "data", None), "frame", None)
        if not isinstance(frame, pd.DataFrame):
            raise IntrospectionError("Model does not keep its data frame", model)
        return frame

    def _parameter_names(self, model: Any) -> List[str]:
        mod, results = _unwrap(model)
        params = getattr(results, "params", None)
        if isinstance(params, (pd.Series, pd.DataFrame)):
            return [str(name) for name in params.index]
        names = getattr(getattr(mod, "data", None), "param_names", None) or getattr(mod, "exog_names", None)
        if not names:
            raise IntrospectionError("Model exposes no parameter names", model)
        return [str(name) for name in names]

    def clean_parameters(self, model: Any) -> pd.DataFrame:
        names = self._parameter_names(model)
        return pd.DataFrame({
            "Parameter": names,
            "Cleaned_Parameter": [clean_name(name) for name in names],
        })

    def model_class(self, model: Any) -> List[str]:
        return class_tags(getattr(model, "_results", model))
